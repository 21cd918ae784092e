"""hershey_strokes: stroke-vector font decoding.

Decodes Hershey-style glyph records (letter-encoded coordinate pairs with
pen-up sentinels) into ordered pen-down polylines, and bundles the "music"
stroke font as static data.

Architecture layers (strict one-way dependency):
    scripts/ → hershey_strokes.configs → hershey_strokes.{fonts,font,geometry}
             → hershey_strokes.{decoder,glyph_ir,codec,errors} → hershey_strokes.utils

Key invariants:
    - Decoding is pure: no module-level mutable state, safe across threads
    - Coordinates stay in integer font units; device scaling is the caller's job
    - Segments always hold >= 2 points and keep encounter (paint) order
    - Font tables are immutable after import
"""

from hershey_strokes.codec import LetterPolicy, PenUpStyle, letter_char, letter_value
from hershey_strokes.decoder import decode, decode_glyph
from hershey_strokes.errors import (
    ConfigError,
    GlyphIndexOutOfRange,
    MalformedGlyph,
    StrokeFontError,
)
from hershey_strokes.font import FontTable, GlyphCache, decode_char
from hershey_strokes.glyph_ir import Point, Segment, StrokePath

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "FontTable",
    "GlyphCache",
    "GlyphIndexOutOfRange",
    "LetterPolicy",
    "MalformedGlyph",
    "PenUpStyle",
    "Point",
    "Segment",
    "StrokeFontError",
    "StrokePath",
    "decode",
    "decode_char",
    "decode_glyph",
    "letter_char",
    "letter_value",
]
