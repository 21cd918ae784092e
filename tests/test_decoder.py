"""Tests for the stroke decoder.

Covers:
    - Extent decoding and advance width
    - Segment splitting on pen lifts (compact, classic pair, auto)
    - Degenerate strokes (empty / single point) dropped silently
    - Malformed records rejected whole
    - Letter policy applied to coordinates and extents
    - Determinism and reentrancy
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from hershey_strokes.codec import LetterPolicy, PenUpStyle
from hershey_strokes.decoder import decode, decode_extents, decode_glyph
from hershey_strokes.errors import MalformedGlyph, StrokeFontError
from hershey_strokes.glyph_ir.paths import Segment, StrokePath

EXCLAMATION = "MWRFQHRTSHRF RHRN RYQZR[SZRY"


# ---------------------------------------------------------------------------
# Extents
# ---------------------------------------------------------------------------


class TestExtents:
    def test_extents_only(self) -> None:
        path = decode_glyph("JZ", 96)
        assert path.segments == ()
        assert path.left == -8
        assert path.right == 8
        assert path.advance_width == 16

    def test_decode_extents(self) -> None:
        assert decode_extents(EXCLAMATION) == (-5, 5)

    def test_negative_advance_is_reported_verbatim(self) -> None:
        path = decode_glyph("ZJ", 96)
        assert path.advance_width == -16

    @pytest.mark.parametrize("record", ["", "J"])
    def test_too_short(self, record: str) -> None:
        with pytest.raises(MalformedGlyph, match=">= 2 characters"):
            decode_glyph(record, 96)

    def test_scale_carried_not_applied(self) -> None:
        a = decode_glyph(EXCLAMATION, 96)
        b = decode_glyph(EXCLAMATION, 21)
        assert a.scale == 96
        assert b.scale == 21
        assert a.segments == b.segments


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


class TestSegments:
    def test_exclamation_three_segments(self) -> None:
        path = decode_glyph(EXCLAMATION, 96)
        assert [len(seg) for seg in path.segments] == [5, 2, 5]
        assert path.advance_width == 10

    def test_exclamation_points(self) -> None:
        path = decode_glyph(EXCLAMATION, 96)
        assert path.segments[0].points == (
            (5, -12), (4, -10), (5, 2), (6, -10), (5, -12),
        )
        assert path.segments[1].points == ((5, -10), (5, -4))
        assert path.segments[2].points == (
            (5, 7), (4, 8), (5, 9), (6, 8), (5, 7),
        )

    def test_first_point_offset_by_left_extent(self) -> None:
        path = decode_glyph(EXCLAMATION, 96)
        x, y = path.segments[0].start
        assert x == ord("R") - ord("M")
        assert y == ord("F") - ord("R")

    def test_y_not_offset_by_left(self) -> None:
        path = decode_glyph("HRRFRT", 96)
        assert path.segments[0].points == ((10, -12), (10, 2))

    def test_segments_are_segment_objects(self) -> None:
        path = decode_glyph(EXCLAMATION, 96)
        assert all(isinstance(seg, Segment) for seg in path.segments)

    def test_single_point_stroke_dropped(self) -> None:
        path = decode_glyph("JZRF RTRU RV", 96)
        assert len(path.segments) == 1
        assert path.segments[0].points == ((8, 2), (8, 3))

    def test_consecutive_spaces_add_no_segments(self) -> None:
        once = decode_glyph("JZRFRT RYQZ", 96)
        twice = decode_glyph("JZRFRT  RYQZ", 96)
        assert once.segments == twice.segments
        assert len(twice.segments) == 2

    def test_trailing_pen_up(self) -> None:
        path = decode_glyph("JZRFRT ", 96)
        assert len(path.segments) == 1

    def test_leading_pen_up(self) -> None:
        path = decode_glyph("JZ RFRT", 96)
        assert len(path.segments) == 1

    def test_body_of_only_pen_up_is_blank(self) -> None:
        path = decode_glyph("JZ ", 96)
        assert path.is_blank
        assert path.advance_width == 16

    def test_encounter_order_preserved(self) -> None:
        path = decode_glyph("JZ[F[G RFRG JFJG", 96)
        starts = [seg.start[0] for seg in path.segments]
        assert starts == [17, 8, 0]

    def test_unpacking(self) -> None:
        segments, advance = decode(EXCLAMATION, 96)
        assert len(segments) == 3
        assert advance == 10

    def test_decode_alias(self) -> None:
        assert decode is decode_glyph


# ---------------------------------------------------------------------------
# Pen-up styles
# ---------------------------------------------------------------------------


class TestPenUpStyles:
    CLASSIC = "JZRFRT RRYQZ"
    CLASSIC_DOUBLE = "JZRFRT R RRYQZ"

    def test_pair_style(self) -> None:
        path = decode_glyph(self.CLASSIC, 96, pen_up=PenUpStyle.PAIR)
        assert [seg.points for seg in path.segments] == [
            ((8, -12), (8, 2)),
            ((8, 7), (7, 8)),
        ]

    def test_pair_sentinel_ignores_second_char(self) -> None:
        a = decode_glyph("JZRFRT RRYQZ", 96, pen_up="pair")
        b = decode_glyph("JZRFRT XRYQZ", 96, pen_up="pair")
        assert a.segments == b.segments

    def test_auto_reads_classic_pairs(self) -> None:
        auto = decode_glyph(self.CLASSIC, 96)
        pair = decode_glyph(self.CLASSIC, 96, pen_up=PenUpStyle.PAIR)
        assert auto == pair

    def test_consecutive_sentinel_pairs(self) -> None:
        pair = decode_glyph(self.CLASSIC_DOUBLE, 96, pen_up=PenUpStyle.PAIR)
        auto = decode_glyph(self.CLASSIC_DOUBLE, 96, pen_up=PenUpStyle.AUTO)
        assert len(pair.segments) == 2
        assert auto.segments == pair.segments

    def test_body_of_single_sentinel_pair(self) -> None:
        for style in (PenUpStyle.PAIR, PenUpStyle.AUTO):
            path = decode_glyph("JZ R", 96, pen_up=style)
            assert path.segments == ()

    def test_single_rejects_classic_pair(self) -> None:
        with pytest.raises(MalformedGlyph, match="Unpaired coordinate"):
            decode_glyph(self.CLASSIC, 96, pen_up=PenUpStyle.SINGLE)

    def test_pair_rejects_compact_odd_body(self) -> None:
        # Three pen lifts: compact body length is odd.
        record = "JZRFRT RHRN RYRZ RVRW"
        assert len(record[2:]) % 2 == 1
        with pytest.raises(MalformedGlyph, match="even length"):
            decode_glyph(record, 96, pen_up=PenUpStyle.PAIR)
        assert len(decode_glyph(record, 96).segments) == 4

    def test_pair_allows_space_as_y(self) -> None:
        path = decode_glyph("RRR RF", 96, pen_up=PenUpStyle.PAIR)
        assert path.segments[0].points == ((0, -50), (0, -12))


# ---------------------------------------------------------------------------
# Malformed records
# ---------------------------------------------------------------------------


class TestMalformed:
    @pytest.mark.parametrize("style", list(PenUpStyle))
    def test_odd_trailing_character(self, style: PenUpStyle) -> None:
        with pytest.raises(MalformedGlyph):
            decode_glyph("JZK", 96, pen_up=style)

    def test_odd_run_before_pen_up(self) -> None:
        with pytest.raises(MalformedGlyph) as exc_info:
            decode_glyph("JZRFR RTRU", 96)
        assert exc_info.value.position == 4
        assert exc_info.value.record == "JZRFR RTRU"

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_glyph("JZK", 96)
        with pytest.raises(StrokeFontError):
            decode_glyph("JZK", 96)

    def test_error_after_valid_segments_returns_nothing(self) -> None:
        with pytest.raises(MalformedGlyph):
            decode_glyph("JZRFRTRU RVRWX", 96, pen_up=PenUpStyle.SINGLE)

    @pytest.mark.parametrize("scale", [0, -96, 1.5, "96", True, None])
    def test_bad_scale(self, scale) -> None:
        with pytest.raises(ValueError, match="scale"):
            decode_glyph("JZ", scale)

    def test_bad_pen_up_style(self) -> None:
        with pytest.raises(ValueError):
            decode_glyph("JZ", 96, pen_up="zigzag")


# ---------------------------------------------------------------------------
# Letter policy
# ---------------------------------------------------------------------------


class TestLetterPolicy:
    RECORD = "JZRF\x01R"

    def test_strict_is_default(self) -> None:
        with pytest.raises(MalformedGlyph) as exc_info:
            decode_glyph(self.RECORD, 96)
        assert exc_info.value.position == 4

    def test_strict_checks_extents(self) -> None:
        with pytest.raises(MalformedGlyph) as exc_info:
            decode_glyph("\x00Z", 96)
        assert exc_info.value.position == 0

    def test_passthrough(self) -> None:
        path = decode_glyph(
            self.RECORD, 96, policy=LetterPolicy.PASSTHROUGH,
        )
        assert path.segments[0].points == ((8, -12), (1 - 82 + 8, 0))

    def test_clamp(self) -> None:
        path = decode_glyph(self.RECORD, 96, policy=LetterPolicy.CLAMP)
        assert path.segments[0].points == ((8, -12), (-42, 0))


# ---------------------------------------------------------------------------
# Purity
# ---------------------------------------------------------------------------


class TestPurity:
    def test_deterministic(self) -> None:
        assert decode_glyph(EXCLAMATION, 96) == decode_glyph(EXCLAMATION, 96)

    def test_result_type(self) -> None:
        assert isinstance(decode_glyph(EXCLAMATION, 96), StrokePath)

    def test_concurrent_decoding(self) -> None:
        expected = decode_glyph(EXCLAMATION, 96)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(lambda _: decode_glyph(EXCLAMATION, 96), range(200))
            )
        assert all(r == expected for r in results)
