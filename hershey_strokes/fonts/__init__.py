"""Bundled stroke fonts.

Usage::

    from hershey_strokes.fonts import MUSIC, get_font
    font = get_font("music")
"""

from __future__ import annotations

from hershey_strokes.font import FontTable
from hershey_strokes.fonts.music import MUSIC

_REGISTRY: dict[str, FontTable] = {
    MUSIC.name: MUSIC,
}


def available_fonts() -> list[str]:
    """Return names of all bundled fonts, sorted."""
    return sorted(_REGISTRY)


def get_font(name: str) -> FontTable:
    """Return the bundled font called *name*.

    Raises
    ------
    KeyError
        If no bundled font has that name.
    """
    try:
        return _REGISTRY[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown font '{name}'. Available: {available_fonts()}"
        ) from None


__all__ = ["MUSIC", "available_fonts", "get_font"]
