"""
Learning Coach Services Module

External collaborators of the Learning Drop pipeline:
- Analytics webhook (fire-and-forget)
- CSV resource catalog
"""

from .webhook import AnalyticsWebhook, build_payload
from .resource_catalog import fetch_learning_resources, parse_catalog_csv

__all__ = [
    "AnalyticsWebhook",
    "build_payload",
    "fetch_learning_resources",
    "parse_catalog_csv",
]
