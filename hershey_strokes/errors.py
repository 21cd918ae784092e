"""Exception hierarchy shared by the decoder, font tables and config loader."""

from __future__ import annotations


class StrokeFontError(Exception):
    """Base class for all hershey_strokes errors."""

    pass


class MalformedGlyph(StrokeFontError, ValueError):
    """Raised when a glyph record cannot be decoded.

    Parameters
    ----------
    message : str
        Human-readable reason.
    record : str
        The offending raw record.
    position : int | None
        Character offset in *record* where decoding failed, if known.
    """

    def __init__(
        self, message: str, record: str, position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.record = record
        self.position = position


class GlyphIndexOutOfRange(StrokeFontError, IndexError):
    """Raised when a character code maps outside a font's glyph table."""

    def __init__(self, char_code: int, index: int, size: int) -> None:
        super().__init__(
            f"Character code {char_code} maps to glyph index {index}, "
            f"outside [0, {size})"
        )
        self.char_code = char_code
        self.index = index
        self.size = size


class ConfigError(StrokeFontError):
    """Raised when configuration validation fails."""

    pass
