"""
Fire-and-forget analytics webhook.

Each successful Learning Drop is posted with the profile that produced it.
Failures are logged and never reach the user.
"""
import logging
import threading
from typing import Any, Dict, Optional

import requests

from learning_coach.core.schemas import GenerationResult, Profile

logger = logging.getLogger(__name__)


def build_payload(profile: Profile, result: GenerationResult) -> Dict[str, Any]:
    return {
        "request": profile.model_dump(mode="json"),
        "response": result.model_dump(mode="json"),
    }


class AnalyticsWebhook:

    def __init__(self, url: Optional[str], timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "AnalyticsWebhook":
        return cls(
            url=getattr(config, 'ANALYTICS_WEBHOOK_URL', None),
            timeout=getattr(config, 'WEBHOOK_TIMEOUT', 10.0),
        )

    def is_enabled(self) -> bool:
        return bool(self.url)

    def send(self, profile: Profile, result: GenerationResult) -> bool:
        """
        POST the drop to the webhook.

        Returns:
            True if the request went through, False otherwise (never raises
            for transport errors)
        """
        if not self.is_enabled():
            return False
        try:
            response = requests.post(
                self.url,
                json=build_payload(profile, result),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error sending data to analytics webhook: {e}")
            return False
        logger.info("Sent Learning Drop to analytics webhook")
        return True

    def notify(self, profile: Profile, result: GenerationResult) -> Optional[threading.Thread]:
        """Send on a daemon thread and return immediately."""
        if not self.is_enabled():
            return None
        thread = threading.Thread(
            target=self.send,
            args=(profile, result),
            name="analytics-webhook",
            daemon=True,
        )
        thread.start()
        return thread
