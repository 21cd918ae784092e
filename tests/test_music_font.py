"""Tests for the bundled music font and the font registry.

Every record in the table is decoded; the aggregate counts pin the data so
that an accidental edit to a record is caught.
"""

from __future__ import annotations

import pytest

from hershey_strokes.codec import PenUpStyle
from hershey_strokes.decoder import decode_glyph
from hershey_strokes.font import decode_char
from hershey_strokes.fonts import MUSIC, available_fonts, get_font


# ---------------------------------------------------------------------------
# Table shape
# ---------------------------------------------------------------------------


class TestTable:
    def test_shape(self) -> None:
        assert MUSIC.name == "music"
        assert MUSIC.scale == 96
        assert len(MUSIC) == 96
        assert MUSIC.first_code == 32
        assert MUSIC.last_code == 127
        assert MUSIC.pen_up is PenUpStyle.SINGLE

    def test_record_data(self) -> None:
        assert sum(len(r) for r in MUSIC.glyphs) == 5711
        assert sum(r.count(" ") for r in MUSIC.glyphs) == 367

    def test_records_are_printable_ascii(self) -> None:
        for record in MUSIC.glyphs:
            assert all(32 <= ord(c) <= 126 for c in record)

    def test_space_glyph(self) -> None:
        assert MUSIC.glyphs[0] == "JZ"

    def test_exclamation_record(self) -> None:
        assert MUSIC.record_for("!") == "MWRFQHRTSHRF RHRN RYQZR[SZRY"

    def test_record_with_backslash(self) -> None:
        assert MUSIC.record_for("A") == "H\\UFH[ UFV[ THU[ LUUU F[L[ R[X["


# ---------------------------------------------------------------------------
# Decoding every glyph
# ---------------------------------------------------------------------------


class TestDecodeAll:
    @pytest.fixture(scope="class")
    def paths(self):
        return [decode_char(MUSIC, code) for code in range(32, 128)]

    def test_all_decode(self, paths) -> None:
        assert len(paths) == 96
        assert all(p.scale == 96 for p in paths)

    def test_total_segments(self, paths) -> None:
        assert sum(len(p.segments) for p in paths) == 462

    def test_only_space_is_blank(self, paths) -> None:
        assert [i for i, p in enumerate(paths) if p.is_blank] == [0]

    def test_segments_follow_runs(self) -> None:
        for record in MUSIC.glyphs:
            runs = [run for run in record[2:].split(" ") if len(run) >= 4]
            path = decode_glyph(record, MUSIC.scale, pen_up=MUSIC.pen_up)
            assert [len(seg) for seg in path.segments] == [
                len(run) // 2 for run in runs
            ]

    def test_auto_agrees_with_single(self) -> None:
        for record in MUSIC.glyphs:
            single = decode_glyph(record, 96, pen_up=PenUpStyle.SINGLE)
            auto = decode_glyph(record, 96, pen_up=PenUpStyle.AUTO)
            assert single == auto

    def test_doubled_spaces_decode_identically(self) -> None:
        for record in MUSIC.glyphs:
            doubled = record.replace(" ", "  ")
            assert decode_glyph(doubled, 96, pen_up=PenUpStyle.SINGLE) == (
                decode_glyph(record, 96, pen_up=PenUpStyle.SINGLE)
            )

    def test_capital_a(self) -> None:
        path = decode_char(MUSIC, "A")
        assert path.left == -10
        assert path.right == 10
        assert path.advance_width == 20
        assert len(path.segments) == 6
        assert path.segments[0].points == ((13, -12), (0, 9))

    def test_underscore(self) -> None:
        path = decode_char(MUSIC, "_")
        assert path.advance_width == 26
        assert path.segments[0].points == ((4, 0), (22, 0))

    def test_out_of_table(self) -> None:
        assert 31 not in MUSIC
        assert 128 not in MUSIC


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_available(self) -> None:
        assert available_fonts() == ["music"]

    def test_get_font_case_insensitive(self) -> None:
        assert get_font("music") is MUSIC
        assert get_font("MUSIC") is MUSIC

    def test_unknown_font(self) -> None:
        with pytest.raises(KeyError, match="Unknown font"):
            get_font("gothic")
