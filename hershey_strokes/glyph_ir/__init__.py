"""
Glyph path intermediate representation.

Defines decoded glyph output as immutable dataclasses. This vocabulary is
the contract between the stroke decoder and whatever draws the strokes.

All coordinates are integer font units: x relative to the glyph's left
extent, y relative to the font's vertical centre (+Y down).
"""

from hershey_strokes.glyph_ir.paths import (
    Point,
    Segment,
    StrokePath,
)

__all__ = [
    "Point",
    "Segment",
    "StrokePath",
]
