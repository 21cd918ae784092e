"""Geometric queries over decoded stroke paths.

Provides:
    - Segment → numpy array conversion for vectorised consumers
    - Polyline length (per segment and total pen-down distance)
    - Axis-aligned bounding box of the inked area
    - Pen-up travel distance between segments

Used by:
    - Inspection script: summary of a decoded glyph
    - Consumers that plot or plan pen moves from decoded paths

All values are in font units.  Nothing here scales to device units; that
mapping belongs to the caller.
"""

from typing import List, Tuple

import numpy as np

from hershey_strokes.glyph_ir.paths import Segment, StrokePath


def segment_array(segment: Segment) -> np.ndarray:
    """Return segment vertices as an array.

    Parameters
    ----------
    segment : Segment
        Decoded segment.

    Returns
    -------
    np.ndarray
        Vertices, shape (N, 2), dtype int64, N ≥ 2
    """
    return np.asarray(segment.points, dtype=np.int64).reshape(-1, 2)


def path_arrays(path: StrokePath) -> List[np.ndarray]:
    """Return every segment of *path* as an (N, 2) array, in paint order."""
    return [segment_array(seg) for seg in path.segments]


def polyline_length(points: np.ndarray) -> float:
    """Compute total length of polyline.

    Parameters
    ----------
    points : np.ndarray
        Polyline vertices, shape (N, 2)

    Returns
    -------
    float
        Sum of Euclidean distances between consecutive points; 0.0 when
        fewer than 2 points.
    """
    if points.shape[0] < 2:
        return 0.0

    diffs = np.diff(points.astype(np.float64), axis=0)
    return float(np.linalg.norm(diffs, axis=1).sum())


def path_length(path: StrokePath) -> float:
    """Total pen-down distance of *path*."""
    return sum(polyline_length(arr) for arr in path_arrays(path))


def travel_length(path: StrokePath) -> float:
    """Total pen-up distance between consecutive segments of *path*.

    Notes
    -----
    Measured end-of-segment to start-of-next in paint order.  Movement
    before the first segment is not counted.
    """
    total = 0.0
    for prev, nxt in zip(path.segments, path.segments[1:]):
        dx = nxt.start[0] - prev.end[0]
        dy = nxt.start[1] - prev.end[1]
        total += float(np.hypot(dx, dy))
    return total


def path_bbox(path: StrokePath) -> Tuple[int, int, int, int]:
    """Compute axis-aligned bounding box of the inked area.

    Parameters
    ----------
    path : StrokePath
        Decoded glyph.

    Returns
    -------
    Tuple[int, int, int, int]
        (xmin, ymin, xmax, ymax)

    Notes
    -----
    Returns empty bbox (0, 0, 0, 0) for blank glyphs.  This is the ink
    extent, which may differ from the advance width.
    """
    if path.is_blank:
        return (0, 0, 0, 0)

    points = np.concatenate(path_arrays(path), axis=0)
    xmin, ymin = points.min(axis=0)
    xmax, ymax = points.max(axis=0)

    return (int(xmin), int(ymin), int(xmax), int(ymax))
