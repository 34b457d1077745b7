"""
Configuration for Learning Coach.

Values come from environment variables (optionally loaded from a .env file).
On GCP, API keys fall back to Google Secret Manager when the environment
variable is not set.

Usage:
    from learning_coach.config import settings as config
    config.GOOGLE_API_KEY, config.LLM_MODEL, ...

Components receive this module (or any object exposing the same attributes)
at construction time and read it with getattr, so tests can pass a Mock.
"""
import logging
import os
from typing import Optional

# Load environment variables from .env file (if present)
# This must happen before any os.getenv() calls
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def is_gcp_environment() -> bool:
    """Check if running on GCP."""
    return (
        os.getenv("GAE_ENV") is not None or  # App Engine
        os.getenv("K_SERVICE") is not None or  # Cloud Run
        os.getenv("GOOGLE_CLOUD_PROJECT") is not None  # Any GCP service
    )


def get_secret(secret_id: str, project_id: Optional[str] = None) -> Optional[str]:
    """
    Get secret from environment variable (local) or Google Secret Manager (GCP).

    Priority:
    1. Environment variable
    2. Secret Manager (if on GCP and env var not set)
    3. None

    Args:
        secret_id: Secret name in Secret Manager or env var name
        project_id: GCP project ID (auto-detected if None)

    Returns:
        Secret value or None if not found
    """
    env_value = os.getenv(secret_id)
    if env_value:
        return env_value

    if not is_gcp_environment():
        return None

    project_id = project_id or os.getenv("GOOGLE_CLOUD_PROJECT")
    if not project_id:
        logger.warning(f"GOOGLE_CLOUD_PROJECT not set, cannot fetch secret {secret_id}")
        return None

    try:
        # Installed with the "gcp" extra
        from google.cloud import secretmanager
    except ImportError:
        logger.warning("google-cloud-secret-manager not installed; install learning-coach[gcp]")
        return None

    try:
        client = secretmanager.SecretManagerServiceClient()
        name = f"projects/{project_id}/secrets/{secret_id}/versions/latest"
        response = client.access_secret_version(request={"name": name})
        logger.info(f"Loaded secret {secret_id} from Secret Manager")
        return response.payload.data.decode("UTF-8")
    except Exception as e:
        # Secret not found or permission denied
        logger.warning(f"Could not fetch secret {secret_id} from Secret Manager: {e}")
        return None


# --- Model Configuration ---
LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.5-flash")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "1.0"))

# --- API Keys (from env vars or Secret Manager) ---
GOOGLE_API_KEY = get_secret("GOOGLE_API_KEY")

# --- Collaborators ---
# Empty URL disables the analytics webhook
ANALYTICS_WEBHOOK_URL = os.getenv("ANALYTICS_WEBHOOK_URL", "")
WEBHOOK_TIMEOUT = float(os.getenv("WEBHOOK_TIMEOUT", "10"))

RESOURCE_CATALOG_URL = os.getenv(
    "RESOURCE_CATALOG_URL",
    "https://docs.google.com/spreadsheets/d/1u-W7UOxT1hQlq80c77OfQ7nSFpD3o2o-mslHekaM_Z4/export?format=csv&gid=0",
)
CATALOG_TIMEOUT = float(os.getenv("CATALOG_TIMEOUT", "15"))

# --- Server Configuration ---
GRADIO_SERVER_NAME = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
GRADIO_SERVER_PORT = int(os.getenv("GRADIO_SERVER_PORT", "7860"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Form Vocabulary ---
LEARNING_PREFERENCES = ["Podcasts", "Books", "Courses", "Articles", "Videos"]

PRICE_PREFERENCES = [
    ("Any", "Any"),
    ("Free", "Free only"),
    ("Paid", "Paid only"),
]

# Pre-filled form so a new session can generate straight away
DEFAULT_PROFILE = {
    "name": "Alex Chen",
    "email": "alex.chen@ontop.com",
    "country": "United States",
    "area": "Engineering",
    "current_position": "Software Engineer II",
    "time_in_current_role": "1 year 2 months",
    "short_term_goals": (
        "Get promoted to Senior Software Engineer. I want to improve my system design "
        "skills and become more proficient in our backend stack (Go, Kubernetes)."
    ),
    "long_term_goals": (
        "Transition into a Tech Lead role within the next 2 years. I want to be able to "
        "mentor junior engineers and lead a small project from a technical perspective."
    ),
    "hard_skills": "System Design, Go (Golang), Kubernetes",
    "soft_skills": "Mentorship, Technical Leadership, Communication",
    "learning_preferences": ["Courses", "Books", "Articles"],
    "price_preference": "Any",
    "time_available_per_week": "5-7 hours",
    "additional_comments": (
        "I'm really interested in distributed systems and microservices architecture. "
        "Any resources on those topics would be great!"
    ),
}

if is_gcp_environment():
    logger.info("Running on GCP - using Secret Manager for API keys")
