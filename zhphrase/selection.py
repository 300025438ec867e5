"""Selecting the 2nd/3rd candidate with dedicated keys, and picking a character from a phrase."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

_NO_HANDLER = -1
_NO_KEY_INDEX = -2


@dataclass(frozen=True)
class SelectionOutcome:
    """What to do with a key event.

    ``handled`` means the event is consumed (filtered). ``accepted`` means it
    is also kept from the application; a handled but unaccepted event passes
    through to the client. ``select`` is the zero-based index of the
    candidate to select, or None.
    """

    handled: bool
    accepted: bool = False
    select: Optional[int] = None


NOT_HANDLED = SelectionOutcome(handled=False)


class SecondThirdSelector:
    """Tracks the keys that select the second and third candidate.

    A modifier key (such as Shift) only selects on release, so that it can
    still be used as a modifier; any other key selects on press and its
    release is swallowed.
    """

    def __init__(self) -> None:
        self._handler = _NO_HANDLER
        self._key_index = _NO_KEY_INDEX

    @property
    def pending(self) -> bool:
        """Whether a press is waiting for its release."""
        return self._handler != _NO_HANDLER

    def reset(self) -> None:
        """Forget any press waiting for its release."""
        self._handler = _NO_HANDLER
        self._key_index = _NO_KEY_INDEX

    def handle(
        self,
        key_index_lists: Sequence[int],
        is_release: bool,
        is_modifier: bool,
    ) -> SelectionOutcome:
        """Process one key event.

        ``key_index_lists`` holds, for the second-candidate keys and then the
        third-candidate keys, the position of the event's key in that key
        list, or -1 where it is not in the list.
        """
        handler, key_index = self._handler, self._key_index
        self.reset()

        if is_release:
            for idx, index in enumerate(key_index_lists):
                if handler == idx and key_index == index:
                    if is_modifier:
                        return SelectionOutcome(True, True, idx + 1)
                    return SelectionOutcome(True, False, None)
            return NOT_HANDLED

        for idx, index in enumerate(key_index_lists):
            if index >= 0:
                self._handler = idx
                self._key_index = index
                if is_modifier:
                    # Let it through to the client; selection waits for release.
                    return SelectionOutcome(True, False, None)
                return SelectionOutcome(True, True, idx + 1)
        return NOT_HANDLED


def select_char_from_phrase(text: str, index: int) -> Optional[str]:
    """The ``index``-th character of a candidate, or None if it is too short."""
    if index < 0:
        raise ValueError(f"character index must not be negative, got {index}")
    if len(text) > index:
        return text[index]
    return None