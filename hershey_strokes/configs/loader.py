"""Decoder configuration loading and validation.

Loads ``decoder.yaml`` and validates it with pydantic for fail-fast error
detection with actionable messages (offending key, expected values).

Usage::

    from hershey_strokes.configs.loader import load_decoder_config
    cfg = load_decoder_config()                        # default path
    cfg = load_decoder_config("/custom/decoder.yaml")  # explicit path
    glyphs = open_font(cfg)
    path = glyphs.get("A")
"""

import logging
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hershey_strokes.codec import LetterPolicy
from hershey_strokes.errors import ConfigError
from hershey_strokes.font import CharCode, FontTable, GlyphCache, decode_char
from hershey_strokes.fonts import available_fonts, get_font
from hershey_strokes.glyph_ir.paths import StrokePath
from hershey_strokes.utils.fs import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "decoder.yaml"


# ============================================================================
# DECODER SCHEMA V1
# ============================================================================

class RotateConfig(BaseModel):
    """Log file rotation."""
    mode: Literal["size", "time"] = "size"
    max_bytes: int = Field(10_000_000, gt=0, description="Rotate after this many bytes")
    when: str = Field("D", description="TimedRotatingFileHandler interval unit")
    interval: int = Field(1, ge=1)
    backup_count: int = Field(5, ge=0)


class LoggingConfig(BaseModel):
    """Keyword arguments for ``setup_logging``."""
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None
    json_format: bool = Field(False, alias="json", description="JSON lines in log file")
    color: bool = True
    to_stderr: bool = True
    rotate: Optional[RotateConfig] = None
    tz: Literal["UTC", "local"] = "UTC"

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    def setup_kwargs(self) -> dict:
        """Return kwargs accepted by ``logging_config.setup_logging``."""
        kwargs = self.model_dump(by_alias=True, exclude={"rotate"})
        kwargs["rotate"] = self.rotate.model_dump() if self.rotate else None
        return kwargs


class DecoderConfigV1(BaseModel):
    """Decoder configuration (decoder.v1 schema)."""
    schema_version: str = Field("decoder.v1", alias="schema", description="Schema version")
    font: str = Field("music", description="Bundled font name")
    letter_policy: LetterPolicy = Field(LetterPolicy.STRICT, description="Out-of-range letter handling")
    cache_glyphs: bool = Field(True, description="Memoize decoded glyphs")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "decoder.v1":
            raise ValueError(f"Expected schema 'decoder.v1', got '{v}'")
        return v

    @field_validator('font')
    @classmethod
    def validate_font(cls, v: str) -> str:
        v = v.lower()
        if v not in available_fonts():
            raise ValueError(f"Unknown font '{v}'. Available: {available_fonts()}")
        return v

    @field_validator('letter_policy', mode='before')
    @classmethod
    def normalize_policy(cls, v):
        return v.lower() if isinstance(v, str) else v


# ============================================================================
# PUBLIC API
# ============================================================================

def load_decoder_config(path: Union[str, Path, None] = None) -> DecoderConfigV1:
    """Load and validate decoder config from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to ``decoder.yaml``.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    DecoderConfigV1
        Validated, frozen configuration.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ConfigError
        If the file is empty or validation fails.
    """
    path = DEFAULT_CONFIG_PATH if path is None else Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Decoder config not found: {path}")

    logger.debug("Loading decoder configuration from %s", path)

    data = load_yaml(path)
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")
    if not isinstance(data, dict):
        raise ConfigError(
            f"Decoder config at {path} must be a mapping, got {type(data).__name__}"
        )

    try:
        return DecoderConfigV1(**data)
    except ValidationError as e:
        raise ConfigError(f"Decoder config validation failed at {path}: {e}") from e


class _UncachedFont:
    """``GlyphCache``-compatible front end that decodes on every call."""

    def __init__(self, font: FontTable, policy: LetterPolicy) -> None:
        self.font = font
        self.policy = policy

    def get(self, char_code: CharCode) -> StrokePath:
        return decode_char(self.font, char_code, policy=self.policy)


def open_font(cfg: DecoderConfigV1) -> Union[GlyphCache, "_UncachedFont"]:
    """Return a glyph source for the configured font.

    The result exposes ``get(char_code) -> StrokePath`` and ``font``; it is a
    :class:`GlyphCache` when ``cfg.cache_glyphs`` is set.
    """
    font = get_font(cfg.font)
    if cfg.cache_glyphs:
        return GlyphCache(font, policy=cfg.letter_policy)
    return _UncachedFont(font, cfg.letter_policy)
