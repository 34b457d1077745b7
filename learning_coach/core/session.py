"""
Session controller: owns one user's profile and generation state.

Only the controller writes SessionState. A generation cannot start while
another is in flight; the UI reads state after each call.
"""
import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from learning_coach.core.response_parser import parse_message
from learning_coach.core.schemas import GenerationResult, LearningFormat, ParsedBlock, Profile

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Failed to generate learning drop. Please try again."


class SessionState(BaseModel):
    profile: Profile
    last_result: Optional[GenerationResult] = None
    blocks: List[ParsedBlock] = Field(default_factory=list)
    is_generating: bool = False
    error_message: Optional[str] = None


class SessionController:
    """
    Drives the Learning Drop flow for a single session.

    Args:
        config: Settings module or object with DEFAULT_PROFILE and
            LEARNING_PREFERENCES attributes
        client: GenerationClient (anything with async generate_for_profile)
        webhook: Optional AnalyticsWebhook notified after each success
    """

    def __init__(self, config, client, webhook=None):
        self.config = config
        self.client = client
        self.webhook = webhook
        self.learning_preferences = [
            LearningFormat(pref) for pref in getattr(config, 'LEARNING_PREFERENCES', [f.value for f in LearningFormat])
        ]
        self.state = SessionState(profile=Profile.model_validate(getattr(config, 'DEFAULT_PROFILE', {}) or {}))
        # Kept across failed attempts so regenerate still has something to avoid
        self._last_message: Optional[str] = None

    @property
    def profile(self) -> Profile:
        return self.state.profile

    def update_field(self, name: str, value) -> Profile:
        """Replace one profile field."""
        self.state.profile = self.state.profile.with_field(name, value)
        return self.state.profile

    def toggle_preference(self, pref) -> Profile:
        """Add a learning format if absent, remove it if present."""
        pref = LearningFormat(pref)
        current = list(self.state.profile.learning_preferences)
        if pref in current:
            current.remove(pref)
        else:
            current.append(pref)
        return self.update_field("learning_preferences", current)

    async def submit(self) -> Optional[GenerationResult]:
        """Generate a fresh Learning Drop. No-op while generating."""
        return await self._generate(previous_message=None)

    async def regenerate(self) -> Optional[GenerationResult]:
        """Generate again, asking the model to avoid the last successful drop."""
        return await self._generate(previous_message=self._last_message)

    async def _generate(self, previous_message: Optional[str]) -> Optional[GenerationResult]:
        if self.state.is_generating:
            logger.info("Generation already in progress; ignoring request")
            return None

        self.state.is_generating = True
        self.state.error_message = None
        self.state.last_result = None
        self.state.blocks = []
        profile = self.state.profile

        try:
            result = await self.client.generate_for_profile(profile, previous_message)
            blocks = parse_message(result.message)
        except Exception as e:
            logger.error(f"Learning Drop generation failed: {e}", exc_info=True)
            self.state.error_message = GENERIC_ERROR_MESSAGE
            return None
        finally:
            self.state.is_generating = False

        self.state.last_result = result
        self.state.blocks = blocks
        self._last_message = result.message
        self._notify_webhook(profile, result)
        return result

    def _notify_webhook(self, profile: Profile, result: GenerationResult):
        if self.webhook is None:
            return
        try:
            self.webhook.notify(profile, result)
        except Exception as e:
            # Analytics must never affect the session
            logger.error(f"Failed to start analytics webhook: {e}")
