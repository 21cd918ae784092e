"""Tests for the glyph path IR value types."""

from __future__ import annotations

import dataclasses

import pytest

from hershey_strokes.glyph_ir import Segment, StrokePath


def _seg(*points):
    return Segment(points=tuple(points))


class TestSegment:
    def test_requires_two_points(self) -> None:
        with pytest.raises(ValueError, match=">= 2 points"):
            _seg((0, 0))
        with pytest.raises(ValueError):
            _seg()

    def test_start_end(self) -> None:
        seg = _seg((0, 0), (1, 2), (3, 4))
        assert seg.start == (0, 0)
        assert seg.end == (3, 4)
        assert len(seg) == 3
        assert list(seg) == [(0, 0), (1, 2), (3, 4)]

    def test_frozen(self) -> None:
        seg = _seg((0, 0), (1, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            seg.points = ()  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({_seg((0, 0), (1, 1)), _seg((0, 0), (1, 1))}) == 1


class TestStrokePath:
    def test_advance_width(self) -> None:
        path = StrokePath(segments=(), left=-5, right=5, scale=96)
        assert path.advance_width == 10
        assert path.is_blank
        assert path.point_count == 0

    def test_unpacks_as_segments_and_advance(self) -> None:
        seg = _seg((0, 0), (1, 1))
        segments, advance = StrokePath(segments=(seg,), left=-2, right=3)
        assert segments == (seg,)
        assert advance == 5

    def test_default_scale(self) -> None:
        assert StrokePath(segments=(), left=0, right=0).scale == 1

    def test_polylines_are_plain_lists(self) -> None:
        path = StrokePath(
            segments=(_seg((0, 0), (1, 2)), _seg((3, 4), (5, 6), (7, 8))),
            left=0,
            right=8,
        )
        assert path.polylines() == [
            [[0, 0], [1, 2]],
            [[3, 4], [5, 6], [7, 8]],
        ]
        assert path.point_count == 5
        assert not path.is_blank

    def test_frozen(self) -> None:
        path = StrokePath(segments=(), left=0, right=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            path.left = 1  # type: ignore[misc]
