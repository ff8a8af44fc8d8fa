"""
Text notations for pretzels.

Two notations are recognised:

* Braid notation: whitespace-separated signed strand numbers, e.g.
  "2 1 5 -1 1 -2". Each number is a twist by +/-1 of that strand.

* Pretzel notation: a strand letter A-Z (strand 1-26) optionally followed
  by an odd twisting count, e.g. "A3B1c3". Whitespace is optional. A
  lower-case letter negates the count, so "A3" and "a-3" are the same
  twist (1, 3). A bare letter has an implied count of one, so "A" is
  (1, 1) and "a" is (1, -1); a word of bare letters only is the simple
  pretzel notation, a.k.a. alphabetic braid notation.

Empty or whitespace-only input is the empty pretzel.
"""

import re
from typing import List, Optional

from .errors import PretzelParseError
from .pretzel import Pretzel, Twist

_BRAID_NOTATION = re.compile(r"\s*(?:[+-]?\d+(?!\d)\s*)*")
_PRETZEL_NOTATION = re.compile(r"\s*(?:[A-Za-z]\s*(?:[+-]?\d+(?!\d)\s*)?)+")

_BRAID_ITEM = re.compile(r"[+-]?\d+")
_PRETZEL_ITEM = re.compile(r"([A-Za-z])\s*([+-]?\d+)?")

MAX_LETTER_STRAND = 26


def _parse_letter(letter: str) -> int:
    """Turn A-Z into 1..26 and a-z into -1..-26."""
    if "A" <= letter <= "Z":
        return ord(letter) - ord("A") + 1
    return -(ord(letter) - ord("a") + 1)


def _parse_braid(text: str) -> List[Twist]:
    twists = []
    for item in _BRAID_ITEM.findall(text):
        n = int(item)
        if n == 0:
            raise PretzelParseError(text, "strand number 0 is not valid")
        twists.append(Twist.from_int(n))
    return twists


def _parse_letters(text: str) -> List[Twist]:
    twists = []
    for letter, count in _PRETZEL_ITEM.findall(text):
        n = _parse_letter(letter)
        k = int(count) if count else 1
        # Twists must be odd.
        if k % 2 == 0:
            raise PretzelParseError(text, f"twist count {k} is even")
        twists.append(Twist(abs(n), k if n > 0 else -k))
    return twists


def parse_pretzel(text: str) -> Pretzel:
    """
    Parse braid or pretzel notation.

    Raises:
        PretzelParseError: if the text matches neither notation, or
            contains a zero strand or an even twist count
    """
    if _BRAID_NOTATION.fullmatch(text):
        return Pretzel(_parse_braid(text))
    if _PRETZEL_NOTATION.fullmatch(text):
        return Pretzel(_parse_letters(text))
    raise PretzelParseError(text)


def try_parse_pretzel(text: str) -> Optional[Pretzel]:
    """Like parse_pretzel, but returns None for invalid input."""
    try:
        return parse_pretzel(text)
    except PretzelParseError:
        return None
