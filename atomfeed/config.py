"""Configuration management for atomfeed."""

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class CodecConfig:
    """Configuration for JSON encoding and decoding."""

    indent: int | None = 2
    ensure_ascii: bool = False
    # Decode identifiers and emails without re-validation. Only for
    # documents this library wrote itself.
    trusted: bool = False


class Config:
    """Main configuration manager."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_JSON_INDENT = 2

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.log_level = os.getenv("ATOMFEED_LOG_LEVEL", self.DEFAULT_LOG_LEVEL).upper()
        self.json_indent = self._parse_indent(os.getenv("ATOMFEED_JSON_INDENT"))
        self.ensure_ascii = self._parse_bool(os.getenv("ATOMFEED_ENSURE_ASCII"))
        self.trusted_decode = self._parse_bool(os.getenv("ATOMFEED_TRUSTED_DECODE"))

    @classmethod
    def _parse_indent(cls, raw: str | None) -> int | None:
        if raw is None:
            return cls.DEFAULT_JSON_INDENT
        raw = raw.strip()
        if not raw or raw.lower() == "none":
            return None
        try:
            indent = int(raw)
        except ValueError as e:
            raise ValueError(f"ATOMFEED_JSON_INDENT must be an integer: {raw!r}") from e
        if indent < 0:
            raise ValueError(f"ATOMFEED_JSON_INDENT must not be negative: {indent}")
        return indent

    @staticmethod
    def _parse_bool(raw: str | None) -> bool:
        return raw is not None and raw.strip().lower() in _TRUE_VALUES

    def get_codec_config(self) -> CodecConfig:
        """Get codec configuration."""
        return CodecConfig(
            indent=self.json_indent,
            ensure_ascii=self.ensure_ascii,
            trusted=self.trusted_decode,
        )
