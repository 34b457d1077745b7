"""
Live test against Gemini with Google Search grounding.

Skipped unless GOOGLE_API_KEY is set.
"""
import os
import pytest
from learning_coach.core.generation_client import GenerationClient
from learning_coach.core.response_parser import parse_message
from learning_coach.core.schemas import ResourceEntry


@pytest.fixture
def live_config(mock_config):
    api_key = os.getenv("GOOGLE_API_KEY")
    if not api_key:
        pytest.skip("GOOGLE_API_KEY not set")
    mock_config.GOOGLE_API_KEY = api_key
    return mock_config


@pytest.mark.integration
@pytest.mark.asyncio
async def test_live_learning_drop(live_config, sample_profile):
    client = GenerationClient(live_config)

    result = await client.generate_for_profile(sample_profile)

    assert result.message
    blocks = parse_message(result.message)
    assert any(isinstance(block, ResourceEntry) for block in blocks)
    assert all(source.uri for source in result.sources)
