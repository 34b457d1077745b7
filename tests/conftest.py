"""
Pytest configuration and fixtures
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


SAMPLE_DEFAULT_PROFILE = {
    "name": "Sam Rivera",
    "email": "sam@example.com",
    "country": "Colombia",
    "area": "Engineering",
    "current_position": "Backend Developer",
    "time_in_current_role": "2 years",
    "short_term_goals": "Lead a service migration",
    "long_term_goals": "Become a staff engineer",
    "hard_skills": "Go, Kubernetes",
    "soft_skills": "Mentorship, Communication",
    "learning_preferences": ["Books", "Courses"],
    "price_preference": "Free",
    "time_available_per_week": "4 hours",
    "additional_comments": "Prefer Spanish resources when possible",
}

SAMPLE_MESSAGE = """Hey Sam, your next challenge awaits.
Your Learning Drop 🚀

**Hard Skills**
[**Go Programming**](https://example.com/go) — Free — (Book 📚)
[**Kubernetes**](https://example.com/k8s) — $120.000 COP — (Course 🎓)

**Soft Skills**
[**Mentorship**](https://example.com/mentor) — Free — (Article 📰)
[**Communication**](https://example.com/comms) — Paid — (Course 🎓)

This mix covers your backend stack and the people skills a lead needs.
Go crush it."""


@pytest.fixture
def mock_config():
    """Create a mock config object"""
    from unittest.mock import Mock
    config = Mock()

    config.GOOGLE_API_KEY = "test_key"
    config.LLM_MODEL = "gemini-2.5-flash"
    config.LLM_TEMPERATURE = 1.0
    config.ANALYTICS_WEBHOOK_URL = ""
    config.WEBHOOK_TIMEOUT = 5.0
    config.RESOURCE_CATALOG_URL = "https://example.com/catalog.csv"
    config.CATALOG_TIMEOUT = 5.0
    config.LEARNING_PREFERENCES = ["Podcasts", "Books", "Courses", "Articles", "Videos"]
    config.PRICE_PREFERENCES = [("Any", "Any"), ("Free", "Free only"), ("Paid", "Paid only")]
    config.DEFAULT_PROFILE = dict(SAMPLE_DEFAULT_PROFILE)

    return config


@pytest.fixture
def sample_profile():
    """Profile built from the sample defaults"""
    from learning_coach.core.schemas import Profile
    return Profile.model_validate(SAMPLE_DEFAULT_PROFILE)


@pytest.fixture
def sample_message():
    """A well-formed Learning Drop as the model is asked to write it"""
    return SAMPLE_MESSAGE
