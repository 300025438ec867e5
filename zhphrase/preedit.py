"""Preedit text shown to the user, and the strings derived from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

_CLOUD_PINYIN_SEPARATORS = " '"


@dataclass(frozen=True)
class PreeditSegment:
    """A run of preedit text with its display format."""

    text: str
    underline: bool = False
    highlight: bool = False


@dataclass
class Preedit:
    """Formatted preedit text with a cursor position counted in characters."""

    segments: list[PreeditSegment] = field(default_factory=list)
    cursor: int = 0

    @property
    def text(self) -> str:
        """The plain text of all segments."""
        return "".join(segment.text for segment in self.segments)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)


def build_preedit(
    preedit_text: str,
    cursor: int,
    sentence: str,
    selected_sentence: str,
    show_in_application: bool,
    cursor_at_beginning: bool,
) -> tuple[Preedit, Preedit]:
    """Build the preedit for the application and the one for the input panel.

    ``preedit_text`` and ``cursor`` describe the full preedit (selected words
    followed by the remaining pinyin). ``sentence`` is the best conversion of
    the whole input and ``selected_sentence`` the part already selected.
    Returns ``(client_preedit, panel_preedit)``.
    """
    if not 0 <= cursor <= len(preedit_text):
        raise ValueError(
            f"cursor {cursor} outside preedit of length {len(preedit_text)}"
        )

    if show_in_application:
        if cursor_at_beginning:
            client = Preedit(
                [
                    PreeditSegment(preedit_text[:cursor], underline=True, highlight=True),
                    PreeditSegment(preedit_text[cursor:], underline=True),
                ],
                0,
            )
        else:
            client = Preedit([PreeditSegment(preedit_text, underline=True)], cursor)
    else:
        client_cursor = 0 if cursor_at_beginning else len(selected_sentence)
        client = Preedit([PreeditSegment(sentence, underline=True)], client_cursor)

    panel = Preedit([PreeditSegment(preedit_text)], cursor)
    return client, panel


def preedit_commit_string(
    selected_sentence: str, user_input: str, selected_length: int
) -> str:
    """Text committed on Return: the selected words plus the unconverted input."""
    if selected_length < 0:
        raise ValueError(f"selected length must not be negative, got {selected_length}")
    return selected_sentence + user_input[selected_length:]


def split_cloud_pinyin(preedit: str, selected: str, word: str) -> Optional[list[str]]:
    """Split the pinyin behind a cloud candidate into one syllable per character.

    ``preedit`` is the raw preedit: the selected sentence followed by the
    segmented pinyin. Returns None when the preedit no longer starts with
    ``selected`` or when the number of syllables does not match ``word``.
    """
    if not preedit.startswith(selected):
        return None
    rest = preedit[len(selected):]
    pinyins: list[str] = []
    current: list[str] = []
    for c in rest:
        if c in _CLOUD_PINYIN_SEPARATORS:
            if current:
                pinyins.append("".join(current))
                current = []
        else:
            current.append(c)
    if current:
        pinyins.append("".join(current))
    if not pinyins or len(pinyins) != len(word):
        return None
    return pinyins