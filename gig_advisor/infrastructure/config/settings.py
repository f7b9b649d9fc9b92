"""
Process configuration read from the environment.

load_dotenv() is called by the entry points before Settings.from_env(), so a
local .env file behaves exactly like exported variables. Malformed numeric
values fall back to their defaults with a warning rather than aborting startup.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_GEMINI_MODEL = "gemini-1.5-pro"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def _env_int(key: str, default: int, *, minimum: int = 1) -> int:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
        if value < minimum:
            raise ValueError
        return value
    except ValueError:
        logger.warning("Invalid %s value '%s'. Falling back to %d.", key, raw, default)
        return default


def _env_float(key: str, default: float, *, minimum: float = 0.0) -> float:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
        if value <= minimum:
            raise ValueError
        return value
    except ValueError:
        logger.warning("Invalid %s value '%s'. Falling back to %.1f.", key, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_base_url: str = DEFAULT_GEMINI_BASE_URL
    gemini_timeout_seconds: float = 30.0
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    static_dir: str = "public"
    chat_api_base_url: str = f"http://localhost:{DEFAULT_PORT}"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=os.environ.get("GEMINI_API_KEY", ""),
            gemini_model=os.environ.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
            gemini_base_url=os.environ.get("GEMINI_API_BASE_URL") or DEFAULT_GEMINI_BASE_URL,
            gemini_timeout_seconds=_env_float("GEMINI_TIMEOUT_SECONDS", 30.0),
            host=os.environ.get("HOST") or "0.0.0.0",
            port=_env_int("PORT", DEFAULT_PORT),
            log_level=(os.environ.get("LOG_LEVEL") or "INFO").upper(),
            static_dir=os.environ.get("STATIC_DIR") or "public",
            chat_api_base_url=(
                os.environ.get("CHAT_API_BASE_URL") or f"http://localhost:{DEFAULT_PORT}"
            ),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
