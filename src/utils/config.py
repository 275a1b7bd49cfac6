"""Load and validate environment variables. Uses python-dotenv.

This module is intentionally thin and side-effect free except for loading `.env`.
Callers should use the accessor functions below rather than reading `os.environ`
directly, to keep environment handling consistent.
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding app.py)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Existing environment variables win over .env values.
    """
    root = _project_root()
    env_path = root / ".env"
    load_dotenv(env_path, override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


# --- Public config accessors ---

def log_level() -> int:
    """
    Optional: logging level name. Default INFO.
    Accepts standard names (DEBUG, INFO, WARNING, ERROR) or a numeric level.
    """
    raw = get_optional("SAMPLER_LOG_LEVEL", "INFO").upper()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


def log_file() -> Optional[Path]:
    """Optional: path of a log file. None logs to stderr only."""
    val = get_optional("SAMPLER_LOG_FILE", "")
    return Path(val) if val else None


def zoo_name() -> str:
    """Optional: name of the showcase zoo. Default City Zoo."""
    return get_optional("SAMPLER_ZOO_NAME", "City Zoo")


def zoo_address() -> str:
    """Optional: address of the showcase zoo."""
    return get_optional("SAMPLER_ZOO_ADDRESS", "1 Park Lane")
