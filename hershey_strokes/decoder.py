"""Stroke decoder -- glyph records to pen-down polylines.

Record layout (compact pen lifts, as in the bundled fonts)::

    "MWRFQHRTSHRF RHRN RYQZR[SZRY"
     ^^                              left, right extents
       ^^^^^^^^^^                    (x, y) pairs, pen down
                 ^                   pen up
                  ^^^^               next segment ...

Classic Hershey data writes each pen lift as the pair ``" R"`` instead of a
lone space; :class:`~hershey_strokes.codec.PenUpStyle` selects which form is
expected.

Each coordinate pair ``(cx, cy)`` decodes to ``(value(cx) - left,
value(cy))``.  Runs of fewer than two points between pen lifts draw nothing
and are dropped.

Decoding is a pure function of its arguments.  The current-segment buffer
lives on the call stack, so concurrent calls need no coordination.
"""

from __future__ import annotations

import logging

from hershey_strokes.codec import PEN_UP, LetterPolicy, PenUpStyle, letter_value
from hershey_strokes.errors import MalformedGlyph
from hershey_strokes.glyph_ir.paths import Point, Segment, StrokePath

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _value(record: str, pos: int, policy: LetterPolicy) -> int:
    """Decode ``record[pos]``, converting codec errors to ``MalformedGlyph``."""
    try:
        return letter_value(record[pos], policy)
    except ValueError as exc:
        raise MalformedGlyph(
            f"Invalid coordinate at offset {pos} of {record!r}: {exc}",
            record,
            pos,
        ) from exc


def _flush(
    current: list[Point], segments: list[Segment], record: str,
) -> None:
    """Move *current* into *segments* if it forms a drawable polyline."""
    if len(current) >= 2:
        segments.append(Segment(points=tuple(current)))
    elif current:
        logger.debug("Dropping single-point stroke %s in %r", current[0], record)
    current.clear()


def _run_length(record: str, pos: int) -> int:
    """Number of non-space characters starting at *pos*."""
    end = record.find(PEN_UP, pos)
    return (len(record) if end < 0 else end) - pos


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def decode_extents(
    record: str, policy: LetterPolicy = LetterPolicy.STRICT,
) -> tuple[int, int]:
    """Return ``(left, right)`` extents of *record*.

    Raises
    ------
    MalformedGlyph
        If *record* is shorter than two characters.
    """
    if len(record) < 2:
        raise MalformedGlyph(
            f"Glyph record must have >= 2 characters, got {len(record)}",
            record,
            len(record),
        )
    return _value(record, 0, policy), _value(record, 1, policy)


def decode_glyph(
    record: str,
    scale: int,
    *,
    pen_up: PenUpStyle = PenUpStyle.AUTO,
    policy: LetterPolicy = LetterPolicy.STRICT,
) -> StrokePath:
    """Decode one glyph record into a stroke path.

    Parameters
    ----------
    record : str
        Raw glyph encoding: two extent characters followed by coordinate
        pairs and pen lifts.
    scale : int
        Nominal height of the owning font.  Carried on the result, not
        applied to coordinates.
    pen_up : PenUpStyle
        How pen lifts are written.  ``AUTO`` accepts both lone spaces and
        ``" R"`` sentinel pairs.
    policy : LetterPolicy
        Handling of characters outside printable ASCII.

    Returns
    -------
    StrokePath
        Segments in encounter order plus extents.

    Raises
    ------
    MalformedGlyph
        Record shorter than 2 characters, a coordinate without its partner
        (odd body under ``PAIR``), or a character rejected by *policy*.
        No partial path is returned.
    ValueError
        If *scale* is not a positive integer.
    """
    if isinstance(scale, bool) or not isinstance(scale, int) or scale <= 0:
        raise ValueError(f"scale must be a positive integer, got {scale!r}")

    pen_up = PenUpStyle(pen_up)
    left, right = decode_extents(record, policy)

    if pen_up is PenUpStyle.PAIR and (len(record) - 2) % 2:
        raise MalformedGlyph(
            f"Glyph record body must have even length, got {len(record) - 2} "
            f"in {record!r}",
            record,
            len(record) - 1,
        )

    segments: list[Segment] = []
    current: list[Point] = []
    pos = 2
    end = len(record)

    while pos < end:
        if record[pos] == PEN_UP:
            _flush(current, segments, record)
            if pen_up is PenUpStyle.PAIR:
                pos += 2
                continue
            pos += 1
            if pen_up is PenUpStyle.AUTO and _run_length(record, pos) % 2:
                # The space opened a sentinel pair; skip its second half.
                pos += 1
            continue

        if pos + 1 >= end or (
            pen_up is not PenUpStyle.PAIR and record[pos + 1] == PEN_UP
        ):
            raise MalformedGlyph(
                f"Unpaired coordinate {record[pos]!r} at offset {pos} "
                f"of {record!r}",
                record,
                pos,
            )

        x = _value(record, pos, policy) - left
        y = _value(record, pos + 1, policy)
        current.append((x, y))
        pos += 2

    _flush(current, segments, record)

    return StrokePath(
        segments=tuple(segments), left=left, right=right, scale=scale,
    )


decode = decode_glyph
"""Alias matching the consumer-facing name ``decode(record, scale)``."""
