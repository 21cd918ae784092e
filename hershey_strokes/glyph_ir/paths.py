"""Glyph path IR -- decoded stroke segments and their container.

A *Segment* is one pen-down polyline.  A *StrokePath* is everything needed
to draw one glyph: its segments in paint order plus horizontal extents.

Coordinates stay in **font units**.  Mapping to device units is left to the
caller, typically ``device = unit / path.scale * desired_height``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

Point = tuple[int, int]
"""One ``(x, y)`` vertex in font units."""


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Segment:
    """Connected pen-down polyline.

    Parameters
    ----------
    points : tuple[Point, ...]
        Ordered vertices.  Must contain >= 2 points.
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise ValueError(
                f"Segment requires >= 2 points, got {len(self.points)}"
            )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]


@dataclass(frozen=True, slots=True)
class StrokePath:
    """Decoded glyph.

    Parameters
    ----------
    segments : tuple[Segment, ...]
        Pen-down polylines in encounter order (paint order).
    left, right : int
        Horizontal extents relative to the glyph centre.
    scale : int
        Nominal height of the font the record was decoded against.

    Unpacks as ``segments, advance_width = path``.
    """

    segments: tuple[Segment, ...]
    left: int
    right: int
    scale: int = field(default=1)

    @property
    def advance_width(self) -> int:
        """Horizontal space occupied by the glyph (``right - left``)."""
        return self.right - self.left

    @property
    def is_blank(self) -> bool:
        """``True`` for space-like glyphs with no strokes."""
        return not self.segments

    @property
    def point_count(self) -> int:
        return sum(len(seg) for seg in self.segments)

    def __iter__(self) -> Iterator:
        yield self.segments
        yield self.advance_width

    def polylines(self) -> list[list[list[int]]]:
        """Return segments as plain nested lists ``[[[x, y], ...], ...]``."""
        return [[list(p) for p in seg.points] for seg in self.segments]
