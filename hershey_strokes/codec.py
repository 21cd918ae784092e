"""Letter-encoded integers.

Every coordinate in a glyph record is a single printable character whose
value is its offset from ``'R'``::

    letter_value('R') == 0
    letter_value('F') == -12
    letter_value('[') == 9

A space where an x coordinate is expected lifts the pen, either on its own or
as the first character of a sentinel pair (see :class:`PenUpStyle`).

Characters outside printable ASCII are never produced by the bundled fonts.
How they are treated is selected with :class:`LetterPolicy`.
"""

from __future__ import annotations

from enum import Enum

ORIGIN = ord("R")
"""Code point that decodes to zero."""

FIRST_PRINTABLE = ord(" ")
LAST_PRINTABLE = ord("~")

PEN_UP = " "
"""Pen-up marker (alone, or as the first character of a sentinel pair)."""


class PenUpStyle(str, Enum):
    """How pen lifts are written in a glyph record.

    ``PAIR``
        Classic Hershey: the record body is strictly ``(x, y)`` pairs and a
        pair whose first character is a space (normally ``" R"``) lifts the
        pen.  The body length must be even.
    ``SINGLE``
        Compact: one space lifts the pen and is not part of any pair.  Each
        run of coordinates between spaces must have even length.
    ``AUTO``
        Accept either.  After a space, an odd-length run of coordinates
        means the space opened a sentinel pair, and its second character
        is skipped.
    """

    PAIR = "pair"
    SINGLE = "single"
    AUTO = "auto"


class LetterPolicy(str, Enum):
    """Treatment of characters outside printable ASCII.

    ``STRICT``
        Reject (the decoder raises ``MalformedGlyph``).
    ``CLAMP``
        Clamp the code point into ``' '..'~'`` before decoding.
    ``PASSTHROUGH``
        Apply ``ord(c) - ord('R')`` unconditionally.
    """

    STRICT = "strict"
    CLAMP = "clamp"
    PASSTHROUGH = "passthrough"


def is_printable(c: str) -> bool:
    """Return ``True`` if *c* is a single printable ASCII character."""
    return FIRST_PRINTABLE <= ord(c) <= LAST_PRINTABLE


def letter_value(
    c: str, policy: LetterPolicy = LetterPolicy.PASSTHROUGH,
) -> int:
    """Decode one letter-encoded character to a signed integer.

    Parameters
    ----------
    c : str
        Single character.
    policy : LetterPolicy
        Out-of-range handling.  Defaults to plain subtraction; the decoder
        passes its own policy explicitly.

    Returns
    -------
    int
        ``ord(c) - ord('R')`` after applying *policy*.

    Raises
    ------
    ValueError
        If *c* is not printable ASCII and *policy* is ``STRICT``.
    """
    code = ord(c)
    if FIRST_PRINTABLE <= code <= LAST_PRINTABLE:
        return code - ORIGIN
    if policy is LetterPolicy.STRICT:
        raise ValueError(
            f"Character {c!r} (U+{code:04X}) outside printable ASCII"
        )
    if policy is LetterPolicy.CLAMP:
        code = max(FIRST_PRINTABLE, min(LAST_PRINTABLE, code))
    return code - ORIGIN


def letter_char(value: int) -> str:
    """Encode a signed integer as a letter (inverse of :func:`letter_value`).

    Raises
    ------
    ValueError
        If the encoded character would fall outside printable ASCII.
    """
    code = value + ORIGIN
    if not FIRST_PRINTABLE <= code <= LAST_PRINTABLE:
        raise ValueError(
            f"Value {value} not encodable: must be in "
            f"[{FIRST_PRINTABLE - ORIGIN}, {LAST_PRINTABLE - ORIGIN}]"
        )
    return chr(code)
