"""Central configuration for the Gemini structured-output demos.

Contains:
- Project paths (logs, generated HTML output)
- Gemini endpoint settings (model, base URL, request timeout)
- API credential loading via .env
"""
from pathlib import Path

from dotenv import load_dotenv
import os

# ============================================================================
# PROJECT PATHS
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent

# Logging
LOGS_DIR = PROJECT_ROOT / "logs"

# UI generation demo writes its document relative to the working directory
CV_FORM_OUTPUT_PATH = Path("generated-cv-form.html")


# ============================================================================
# GEMINI SETTINGS
# ============================================================================

# Load environment variables from the .env file (in project root)
load_dotenv(PROJECT_ROOT / ".env")

GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
)

# Request timeout in seconds, handed straight to requests
GEMINI_TIMEOUT = 60


def validate_api_key() -> None:
    """Validate that GOOGLE_API_KEY is set.

    Raises:
        ValueError: If GOOGLE_API_KEY environment variable is not set.

    Note:
        Call this function at the start of any demo before touching the network.
    """
    if not GOOGLE_API_KEY:
        raise ValueError(
            "GOOGLE_API_KEY not found in environment variables. "
            "Copy .env.example to .env and add your API key."
        )
