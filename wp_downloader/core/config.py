# core/config.py
import logging
import os

from dotenv import load_dotenv

# Load .env
load_dotenv()

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


# ---- SERVER ----
HOST = os.getenv("HOST", "127.0.0.1")
PORT = _int_env("PORT", 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ---- UPSTREAM ----
DOWNLOADS_BASE_URL = os.getenv(
    "WP_DOWNLOADS_BASE_URL", "https://downloads.wordpress.org/plugin"
).rstrip("/")
PROBE_TIMEOUT = _float_env("WP_PROBE_TIMEOUT", 10.0)
DOWNLOAD_TIMEOUT = _float_env("WP_DOWNLOAD_TIMEOUT", 30.0)
CHUNK_SIZE = _int_env("WP_CHUNK_SIZE", 8192)

# Shown to the user when the URL does not look like a plugin page
EXAMPLE_PLUGIN_URL = "https://wordpress.org/plugins/plugin-name/"
