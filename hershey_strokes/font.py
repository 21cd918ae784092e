"""Font tables and character lookup.

A :class:`FontTable` is an immutable value: a nominal height plus a tuple of
glyph records indexed from ``first_code`` (ASCII 32, space, by default).
Tables are built once at import and shared freely between threads.

Usage::

    from hershey_strokes.font import decode_char
    from hershey_strokes.fonts import MUSIC

    segments, advance = decode_char(MUSIC, "A")

Decoding is pure, so a cache is optional.  :class:`GlyphCache` memoizes
decoded paths by glyph index behind a lock for callers that redraw the
same text repeatedly.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Union

from hershey_strokes.codec import LetterPolicy, PenUpStyle
from hershey_strokes.decoder import decode_glyph
from hershey_strokes.errors import GlyphIndexOutOfRange
from hershey_strokes.glyph_ir.paths import StrokePath

logger = logging.getLogger(__name__)

CharCode = Union[int, str]
"""Integer code point or a one-character string."""

DEFAULT_FIRST_CODE = 32


def _as_code(char_code: CharCode) -> int:
    if isinstance(char_code, str):
        if len(char_code) != 1:
            raise TypeError(
                f"Expected a single character, got {char_code!r}"
            )
        return ord(char_code)
    if isinstance(char_code, bool) or not isinstance(char_code, int):
        raise TypeError(
            f"Character code must be int or str, got {type(char_code).__name__}"
        )
    return char_code


# ---------------------------------------------------------------------------
# Font table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FontTable:
    """Static stroke font.

    Parameters
    ----------
    name : str
        Registry name, e.g. ``"music"``.
    scale : int
        Nominal em-height in font units.
    glyphs : tuple[str, ...]
        Raw glyph records, index 0 corresponds to ``first_code``.
    first_code : int
        Character code of ``glyphs[0]``.
    pen_up : PenUpStyle
        How pen lifts are written in the records.
    """

    name: str
    scale: int
    glyphs: tuple[str, ...]
    first_code: int = DEFAULT_FIRST_CODE
    pen_up: PenUpStyle = PenUpStyle.AUTO

    def __post_init__(self) -> None:
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise TypeError(f"Font scale must be int, got {self.scale!r}")
        if self.scale <= 0:
            raise ValueError(f"Font scale must be positive, got {self.scale}")
        if not isinstance(self.glyphs, tuple):
            object.__setattr__(self, "glyphs", tuple(self.glyphs))
        object.__setattr__(self, "pen_up", PenUpStyle(self.pen_up))

    def __len__(self) -> int:
        return len(self.glyphs)

    def __contains__(self, char_code: object) -> bool:
        try:
            self.glyph_index(char_code)  # type: ignore[arg-type]
        except (GlyphIndexOutOfRange, TypeError):
            return False
        return True

    @property
    def last_code(self) -> int:
        """Highest character code with a glyph."""
        return self.first_code + len(self.glyphs) - 1

    def glyph_index(self, char_code: CharCode) -> int:
        """Map a character code to a position in :attr:`glyphs`.

        Raises
        ------
        GlyphIndexOutOfRange
            If the index falls outside ``[0, len(glyphs))``.
        """
        code = _as_code(char_code)
        index = code - self.first_code
        if not 0 <= index < len(self.glyphs):
            raise GlyphIndexOutOfRange(code, index, len(self.glyphs))
        return index

    def record_for(self, char_code: CharCode) -> str:
        """Return the raw glyph record for *char_code*."""
        return self.glyphs[self.glyph_index(char_code)]


# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------


def decode_char(
    font: FontTable,
    char_code: CharCode,
    *,
    policy: LetterPolicy = LetterPolicy.STRICT,
) -> StrokePath:
    """Decode the glyph for *char_code* in *font*.

    The index is resolved first; the decoder is not invoked for codes
    outside the table.

    Raises
    ------
    GlyphIndexOutOfRange
        If *char_code* has no glyph in *font*.
    MalformedGlyph
        If the stored record is malformed.
    """
    record = font.record_for(char_code)
    return decode_glyph(
        record, font.scale, pen_up=font.pen_up, policy=policy,
    )


class GlyphCache:
    """Thread-safe memo of decoded glyphs for one font.

    Decoded paths are immutable, so the same object is handed to every
    caller.  Failed decodes are not cached.

    Parameters
    ----------
    font : FontTable
        Font to decode from.
    policy : LetterPolicy
        Letter policy passed to the decoder.
    """

    def __init__(
        self,
        font: FontTable,
        policy: LetterPolicy = LetterPolicy.STRICT,
    ) -> None:
        self.font = font
        self.policy = policy
        self._paths: dict[int, StrokePath] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

    def get(self, char_code: CharCode) -> StrokePath:
        """Return the decoded path for *char_code*, decoding on first use."""
        index = self.font.glyph_index(char_code)
        with self._lock:
            path = self._paths.get(index)
        if path is not None:
            return path

        # Decode outside the lock; a racing thread computes the same value.
        path = decode_glyph(
            self.font.glyphs[index],
            self.font.scale,
            pen_up=self.font.pen_up,
            policy=self.policy,
        )
        with self._lock:
            path = self._paths.setdefault(index, path)
        logger.debug(
            "Cached glyph %d of font %s (%d segments)",
            index, self.font.name, len(path.segments),
        )
        return path

    def clear(self) -> None:
        """Drop all cached paths."""
        with self._lock:
            self._paths.clear()
