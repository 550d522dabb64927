"""
Runtime configuration for the html_readability framework.

Values come from keyword arguments or, via from_env(), from READABILITY_*
environment variables. Scripts call python-dotenv's load_dotenv() before
from_env() so a local .env file is honoured.
"""

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Parser order for the tree builder: html5lib follows the WHATWG algorithm,
# lxml is fast and tolerant, html.parser is always available.
DEFAULT_PARSERS = ["html5lib", "lxml", "html.parser"]

SUPPORTED_PARSERS = {"html5lib", "lxml", "html.parser"}


class ReadabilityConfig(BaseModel):
    """Settings shared by every stage of one Readability instance."""
    default_charset: str = "utf-8"
    parsers: list[str] = Field(default_factory=lambda: list(DEFAULT_PARSERS))
    log_level: Optional[str] = None       # None leaves the caller's logging setup alone
    log_file: Optional[str] = None

    @field_validator("parsers")
    @classmethod
    def _check_parsers(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in SUPPORTED_PARSERS]
        if unknown:
            raise ValueError(f"Unsupported parsers: {', '.join(unknown)}")
        if not value:
            raise ValueError("At least one parser is required")
        return value

    @field_validator("default_charset")
    @classmethod
    def _normalize_charset(cls, value: str) -> str:
        return value.strip().lower() or "utf-8"

    @classmethod
    def from_env(cls) -> "ReadabilityConfig":
        """Build a config from READABILITY_* environment variables."""
        values = {}

        charset = os.getenv("READABILITY_CHARSET")
        if charset:
            values["default_charset"] = charset

        parsers = os.getenv("READABILITY_PARSERS")
        if parsers:
            values["parsers"] = [p.strip() for p in parsers.split(",") if p.strip()]

        log_level = os.getenv("READABILITY_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()

        log_file = os.getenv("READABILITY_LOG_FILE")
        if log_file:
            values["log_file"] = log_file

        return cls(**values)
