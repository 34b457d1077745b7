"""
CSV-backed learning resource catalog.

The sheet has the columns title, type, url, price, description, keywords
(keywords separated by ';'). Rows are split naively on commas: the sheet has no
quoted fields, and rows with fewer fields than the header are skipped.
"""
import logging
from typing import List

import requests

from learning_coach.core.errors import CatalogError
from learning_coach.core.schemas import LearningResource

logger = logging.getLogger(__name__)


def _field(row: List[str], index: int) -> str:
    if index < 0 or index >= len(row):
        return ""
    return row[index].strip()


def parse_catalog_csv(csv_text: str) -> List[LearningResource]:
    """
    Parse the catalog CSV.

    Args:
        csv_text: Raw CSV text (CRLF or LF line endings)

    Returns:
        Resources in sheet order
    """
    lines = csv_text.strip().replace("\r\n", "\n").split("\n")
    if len(lines) < 2:
        return []

    headers = [header.strip() for header in lines[0].split(",")]
    columns = {
        name: headers.index(name) if name in headers else -1
        for name in ("title", "type", "url", "price", "description", "keywords")
    }

    resources = []
    for line in lines[1:]:
        row = line.split(",")
        if len(row) < len(headers):
            continue

        keywords = _field(row, columns["keywords"])
        resources.append(LearningResource(
            title=_field(row, columns["title"]),
            type=_field(row, columns["type"]) or "Article",
            url=_field(row, columns["url"]),
            price=_field(row, columns["price"]) or "Free",
            description=_field(row, columns["description"]),
            keywords=[keyword.strip() for keyword in keywords.split(";")] if keywords else [],
        ))
    return resources


def fetch_learning_resources(url: str, timeout: float = 15.0) -> List[LearningResource]:
    """
    Download and parse the catalog.

    Raises:
        CatalogError: the sheet could not be fetched
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Error fetching learning resources: {e}")
        raise CatalogError("Could not load learning resources from the data source.") from e

    resources = parse_catalog_csv(response.text)
    logger.info(f"Loaded {len(resources)} learning resources from catalog")
    return resources
