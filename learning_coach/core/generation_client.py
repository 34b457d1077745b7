"""
Gemini client for Learning Drop generation.

One call per generate(), with the google_search tool bound so the model can
verify links and report grounding citations. No retries: the user regenerates
manually.
"""
import logging
from typing import Callable, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from learning_coach.core.errors import CommunicationError, ConfigurationError
from learning_coach.core.llm_utils import extract_content_as_string, extract_grounding_citations
from learning_coach.core.prompts import build_prompt
from learning_coach.core.schemas import GenerationRequest, GenerationResult, Profile

logger = logging.getLogger(__name__)

GOOGLE_SEARCH_TOOL = {"google_search": {}}


def create_llm(config, api_key: str) -> BaseChatModel:
    """Create the Gemini chat model from config."""
    from langchain_google_genai import ChatGoogleGenerativeAI

    model_name = getattr(config, 'LLM_MODEL', 'gemini-2.5-flash')
    temperature = getattr(config, 'LLM_TEMPERATURE', 1.0)
    logger.info(f"Using Google Gemini API: {model_name}")
    return ChatGoogleGenerativeAI(
        model=model_name,
        temperature=temperature,
        google_api_key=api_key
    )


class GenerationClient:
    """
    Server-side boundary to Gemini.

    The API key never leaves this object; the UI only calls
    generate_for_profile().
    """

    def __init__(self, config, llm_factory: Optional[Callable[[str], BaseChatModel]] = None):
        self.config = config
        self.api_key = getattr(config, 'GOOGLE_API_KEY', None)
        self._llm_factory = llm_factory or (lambda api_key: create_llm(config, api_key))
        self._llm = None

    def is_available(self) -> bool:
        return bool(self.api_key)

    def _get_llm(self):
        if self._llm is None:
            self._llm = self._llm_factory(self.api_key).bind_tools([GOOGLE_SEARCH_TOOL])
        return self._llm

    async def generate(self, prompt: str) -> GenerationResult:
        """
        Send a prompt to Gemini with search grounding.

        Args:
            prompt: Full prompt text

        Returns:
            GenerationResult with the raw message and non-empty citations

        Raises:
            ConfigurationError: GOOGLE_API_KEY is not set (no call is made)
            CommunicationError: the call failed for any reason
        """
        if not self.is_available():
            raise ConfigurationError("GOOGLE_API_KEY environment variable not set")

        try:
            response = await self._get_llm().ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}", exc_info=True)
            raise CommunicationError("Failed to communicate with the AI model.") from e

        return GenerationResult(
            message=extract_content_as_string(response),
            sources=extract_grounding_citations(response),
        )

    async def generate_for_profile(self, profile: Profile, previous_message: Optional[str] = None) -> GenerationResult:
        """Build the prompt for a profile and generate a Learning Drop."""
        request = GenerationRequest(profile=profile, previous_message=previous_message)
        if request.is_regeneration:
            logger.info("Regenerating Learning Drop with previous message as negative context")
        return await self.generate(build_prompt(request.profile, request.previous_message))
