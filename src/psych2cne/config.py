"""Centralized configuration for the Psych/CNE converter.

This module provides:
- PROJECT_ROOT and PACKAGE_DIR paths
- PSYCH2CNE_* settings via get_env()
- Automatic .env loading
- The watermark embedded in converted output

Usage:
    from psych2cne.config import get_env, get_watermark

    watermark = get_watermark()
    root_attributes = get_env("ROOT_ATTRIBUTES", default="")
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from psych2cne.exceptions import ConfigurationError

# Calculate paths once at import time
PACKAGE_DIR = Path(__file__).parent.resolve()
PROJECT_ROOT = PACKAGE_DIR.parent.parent.resolve()
ENV_PREFIX = "PSYCH2CNE_"

# Load .env from project root
_env_path = PROJECT_ROOT / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


class Watermark(BaseModel):
    """Provenance markers written into converted output."""
    model_config = ConfigDict(frozen=True)

    xml_comment: str
    json_marker: str


DEFAULT_WATERMARK = Watermark(
    xml_comment="<!-- Converted using Psych2CNE hackx2.github.io/psych2cne -->",
    json_marker="Converted using Psych2CNE hackx2.github.io/psych2cne",
)


def get_env(name: str, default: Optional[str] = None) -> str:
    """Read the ``PSYCH2CNE_<name>`` setting.

    Raises:
        ConfigurationError: If the variable is unset and there is no default
    """
    key = ENV_PREFIX + name
    value = os.environ.get(key, default)
    if value is None:
        raise ConfigurationError(f"{key} is not set")
    return value


def get_watermark() -> Watermark:
    """Get the watermark, with PSYCH2CNE_*_WATERMARK overrides applied."""
    return Watermark(
        xml_comment=get_env("XML_WATERMARK", default=DEFAULT_WATERMARK.xml_comment),
        json_marker=get_env("JSON_WATERMARK", default=DEFAULT_WATERMARK.json_marker),
    )


def get_default_root_attributes() -> str:
    """Get the attribute fragment spliced into <character> by the CLI."""
    return get_env("ROOT_ATTRIBUTES", default="")


def get_log_level_name() -> str:
    """Get the CLI log level name."""
    return get_env("LOG_LEVEL", default="INFO")
