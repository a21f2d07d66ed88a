# --- Standard library imports ---
import os

# --- Third-party imports ---
from dotenv import load_dotenv


# Load .env once
load_dotenv()


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Centralized config for the DDNS agent, read once from the environment"""

    # --- Cloudflare ---
    CLOUDFLARE_API_TOKEN = os.getenv("CLOUDFLARE_API_TOKEN")
    CLOUDFLARE_API_BASE_URL = os.getenv(
        "CLOUDFLARE_API_BASE_URL", "https://api.cloudflare.com/client/v4"
    )
    ZONE_IDS = os.getenv("CLOUDFLARE_ZONE_IDS", "")

    # --- Public IP provider ---
    PUBLIC_IP_URL = os.getenv("PUBLIC_IP_URL", "https://checkip.amazonaws.com")

    # --- Scheduling Policy ---
    CYCLE_INTERVAL = _env_int("CYCLE_INTERVAL", 300)
    ENFORCE_MIN_INTERVAL = _env_flag("ENFORCE_MIN_INTERVAL", "true")

    # --- Scheduling Constants (NOT user configurable) ---
    MIN_CYCLE_INTERVAL = 30  # seconds

    # --- Network Policy (NOT user configurable) ---
    API_TIMEOUT = 8   # seconds

    # --- Observability Policy ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_TIMING = _env_flag("LOG_TIMING", "false")
