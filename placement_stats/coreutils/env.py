from dotenv import load_dotenv
import os
import logging

logger = logging.getLogger(__name__)

load_dotenv()  # take environment variables from .env

DEFAULT_SOURCE = "data/placements.json"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_LOG_DIR = "logs"
DEFAULT_HTTP_TIMEOUT = 30.0


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def placements_source() -> str:
    """Location of the placements JSON (file path or http(s) URL)."""
    return env_get("PLACEMENTS_SOURCE", DEFAULT_SOURCE)


def output_dir() -> str:
    return env_get("PLACEMENTS_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)


def log_dir() -> str:
    return env_get("PLACEMENTS_LOG_DIR", DEFAULT_LOG_DIR)


def http_timeout() -> float:
    """HTTP timeout in seconds, falling back to the default on bad values."""
    raw = env_get("PLACEMENTS_HTTP_TIMEOUT")
    if raw is None:
        return DEFAULT_HTTP_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            f"Invalid PLACEMENTS_HTTP_TIMEOUT {raw!r}, using {DEFAULT_HTTP_TIMEOUT}s"
        )
        return DEFAULT_HTTP_TIMEOUT
