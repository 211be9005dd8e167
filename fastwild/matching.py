"""Wildcard matching with '*' (any run) and '?' (any single element).

The algorithm scans both inputs once. It keeps a single fallback position
after the most recent '*', so it never backtracks further than that.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Union

__all__ = ["fast_wild_compare_ascii", "fast_wild_compare_utf8"]

Text = Union[str, bytes, bytearray]

_STAR_BYTE = ord("*")
_QUESTION_BYTE = ord("?")


def _skip_stars(wild: Sequence, iwild: int, star: Hashable) -> int | None:
    """Advance past the '*' at ``iwild`` and any '*' that follow it.

    Returns the index of the next non-'*' element, or None if the pattern
    ends in that run of stars.
    """
    iwild += 1
    while iwild < len(wild):
        if wild[iwild] != star:
            return iwild
        iwild += 1
    return None


def _wild_match(
    wild: Sequence, tame: Sequence, star: Hashable, question: Hashable
) -> bool:
    """Match ``tame`` against the pattern ``wild``, element by element."""
    wlen = len(wild)
    tlen = len(tame)
    iwild = 0

    # Compare both inputs in step until the first '*' shows up.
    while True:
        if tlen <= iwild:
            if wlen > iwild:
                while wild[iwild] == star:
                    iwild += 1
                    if wlen <= iwild:
                        return True  # "ab" matches "ab*".
                return False  # "abcd" doesn't match "abc".
            return True  # "abc" matches "abc".
        if wlen <= iwild:
            return False  # "abc" doesn't match "abcd".
        if wild[iwild] == star:
            itame = iwild
            next_wild = _skip_stars(wild, iwild, star)
            if next_wild is None:
                return True  # "abc*" matches "abcd".
            iwild = next_wild
            if wild[iwild] != question:
                while wild[iwild] != tame[itame]:
                    itame += 1
                    if tlen <= itame:
                        return False  # "a*bc" doesn't match "ab".
            iwild_sequence = iwild
            itame_sequence = itame
            break
        if wild[iwild] != tame[iwild] and wild[iwild] != question:
            return False  # "abc" doesn't match "abd".
        iwild += 1

    # Handle any further wildcards and matching sequences.
    while True:
        if iwild < wlen and wild[iwild] == star:
            next_wild = _skip_stars(wild, iwild, star)
            if next_wild is None:
                return True  # "ab*c*" matches "abcd".
            iwild = next_wild
            if tlen <= itame:
                return False  # "*bcd*" doesn't match "abc".
            if wild[iwild] != question:
                while itame < tlen and wild[iwild] != tame[itame]:
                    itame += 1
                    if tlen <= itame:
                        return False  # "a*b*c" doesn't match "ab".
            iwild_sequence = iwild
            itame_sequence = itame
        else:
            if tlen <= itame:
                return wlen <= iwild  # "*b*c" matches "abc"; "*bcd" not.
            if wlen <= iwild or (
                wild[iwild] != tame[itame] and wild[iwild] != question
            ):
                # Step over any '?' run at the fallback point.
                while iwild_sequence < wlen and wild[iwild_sequence] == question:
                    iwild_sequence += 1
                    itame_sequence += 1
                iwild = iwild_sequence

                # Fall back, but never so far again.
                while True:
                    itame_sequence += 1
                    if tlen <= itame_sequence:
                        return wlen <= iwild  # "*a*b" matches "ab"; not "ac".
                    if iwild < wlen and wild[iwild] == tame[itame_sequence]:
                        break
                itame = itame_sequence

        if tlen <= itame:
            return wlen <= iwild  # "*bc" matches "abc"; not "abcd".

        iwild += 1
        itame += 1


def _as_bytes(value: Text) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def fast_wild_compare_ascii(wild: Text, tame: Text) -> bool:
    """Match ``tame`` against ``wild`` one byte at a time.

    Strings are compared by their UTF-8 bytes, so '?' stands for exactly
    one byte. Intended for ASCII text.
    """
    return _wild_match(_as_bytes(wild), _as_bytes(tame), _STAR_BYTE, _QUESTION_BYTE)


def fast_wild_compare_utf8(wild: Sequence[str], tame: Sequence[str]) -> bool:
    """Match ``tame`` against ``wild`` one code point at a time.

    Accepts strings or sequences of single-character strings; '?' stands for
    exactly one code point.
    """
    if isinstance(wild, (bytes, bytearray)) or isinstance(tame, (bytes, bytearray)):
        raise TypeError("expected text or a sequence of characters, not bytes")
    return _wild_match(wild, tame, "*", "?")