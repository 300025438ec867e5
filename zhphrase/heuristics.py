"""Small input heuristics: English detection, stroke input and quick phrase triggers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

_FULL_WEIGHT = -2
_SHORT_WEIGHT = 3
_INVALID_WEIGHT = 6

_STROKE_KEYS = frozenset("hpszn")
_STROKE_DIGITS = {"h": "1", "s": "2", "p": "3", "n": "4", "z": "5"}
_MAX_STROKE_LOOKUP = 3


def _is_ascii_letter(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def english_ness(text: str, shuangpin: bool) -> int:
    """Estimate how likely the segmented pinyin ``text`` is an English word.

    ``text`` is the raw preedit with syllables separated by spaces. The
    result is zero when the input looks like real pinyin and grows with the
    number of short or impossible syllables.
    """
    weight = 0
    for syllable in (part for part in text.split(" ") if part):
        if shuangpin:
            weight += _FULL_WEIGHT // 2 if len(syllable) == 2 else _INVALID_WEIGHT
            continue
        if syllable == "ng":
            weight += _FULL_WEIGHT
            continue
        first = syllable[0]
        if first == "'":
            return 0
        if first in "iuv":
            weight += _INVALID_WEIGHT
        elif len(syllable) <= 2:
            weight += _SHORT_WEIGHT
        elif any(c in "aeiou" for c in syllable):
            weight += _FULL_WEIGHT
        else:
            weight += _SHORT_WEIGHT

    if weight < 0:
        return 0
    return (weight + 7) // 10


def is_stroke(text: str) -> bool:
    """Whether every character of ``text`` is one of the stroke keys h, p, s, z, n."""
    return all(c in _STROKE_KEYS for c in text)


def stroke_lookup_limit(text: str) -> int:
    """How many characters to look up for a stroke sequence, at most three."""
    return min((len(text) + 4) // 5, _MAX_STROKE_LOOKUP)


def stroke_key_to_digit(key: str) -> Optional[str]:
    """The stroke digit typed by ``key`` in stroke filtering, or None."""
    return _STROKE_DIGITS.get(key)


def consume_prefix(view: str, prefix: str) -> Optional[str]:
    """Return ``view`` without ``prefix`` if it starts with it, else None."""
    if view.startswith(prefix):
        return view[len(prefix):]
    return None


def build_quickphrase_trigger_dict(prefixes: Iterable[str]) -> dict[str, set[str]]:
    """Map the letter part of each trigger string to its final trigger characters.

    A trigger is a run of ASCII letters followed by one character; entries
    whose leading part holds anything other than letters are ignored.
    """
    result: dict[str, set[str]] = {}
    for prefix in prefixes:
        if not prefix:
            continue
        latin, trigger = prefix[:-1], prefix[-1]
        if not all(_is_ascii_letter(c) for c in latin):
            continue
        if trigger == "\0":
            continue
        result.setdefault(latin, set()).add(trigger)
    return result