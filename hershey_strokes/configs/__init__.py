"""Decoder configuration loading and validation."""

from hershey_strokes.configs.loader import (
    DecoderConfigV1,
    LoggingConfig,
    load_decoder_config,
    open_font,
)
from hershey_strokes.errors import ConfigError

__all__ = [
    "ConfigError",
    "DecoderConfigV1",
    "LoggingConfig",
    "load_decoder_config",
    "open_font",
]
