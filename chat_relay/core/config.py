# centralized configuration loader
# runs load_dotenv() to read .env
# create_app() reads these once and keeps them on app.state, handlers never read them directly

import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}


# Provider
PROVIDER = os.getenv("PROVIDER", "gemini")
GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com").rstrip("/")
GEMINI_MODEL_FLASH = os.getenv("GEMINI_MODEL_FLASH", "gemini-2.5-flash")
GEMINI_MODEL_PRO = os.getenv("GEMINI_MODEL_PRO", "gemini-2.5-pro")
REQUEST_TIMEOUT_S = float(os.getenv("REQUEST_TIMEOUT_S", "60"))

# Credential used when a request carries no x-api-key header
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or None

# Behaviour switches
STRICT_MODEL_SELECTOR = _env_bool("STRICT_MODEL_SELECTOR", "false")
DETAILED_ERROR_STATUS = _env_bool("DETAILED_ERROR_STATUS", "false")
