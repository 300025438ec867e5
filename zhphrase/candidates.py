"""Placing extra candidates among the decoder's candidates, and their sources."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from zhphrase.customphrase import CustomPhrase, Evaluator

MAX_PREDICT_HISTORY = 5


@dataclass(frozen=True)
class ExtraCandidate:
    """A candidate that does not come from the decoder.

    ``order`` is the zero-based position it asks for in the final list.
    """

    text: str
    order: int


class CandidateMerger:
    """Build a candidate list and insert extra candidates into it.

    Regular candidates are appended one by one. Extra candidates wait until
    the list is long enough to hold the last of them, or longer than two
    pages, and are then inserted all at once. :meth:`finish` inserts any
    extras still waiting, clamped to the end of the list.
    """

    def __init__(self, extras: Iterable[ExtraCandidate], page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"page size must be positive, got {page_size}")
        # sorted() is stable, so extras asking for the same slot keep their order.
        self._extras: list[ExtraCandidate] = sorted(extras, key=lambda e: e.order)
        self._page_size = page_size
        self._candidates: list[Any] = []

    @property
    def candidates(self) -> list[Any]:
        """The list built so far."""
        return list(self._candidates)

    @property
    def pending(self) -> list[ExtraCandidate]:
        """Extra candidates not yet inserted."""
        return list(self._extras)

    def append(self, candidate: Any) -> None:
        """Append a regular candidate and insert the extras if it is time."""
        self._candidates.append(candidate)
        self._apply_extras(force=False)

    def finish(self) -> list[Any]:
        """Insert every waiting extra candidate and return the final list."""
        self._apply_extras(force=True)
        return list(self._candidates)

    def _apply_extras(self, force: bool) -> None:
        if not self._extras:
            return
        total = len(self._candidates)
        if not (
            force
            or total > self._extras[-1].order
            or total > 2 * self._page_size
        ):
            return
        last_pos = -1
        for extra in self._extras:
            position = max(last_pos, extra.order)
            position = min(position, len(self._candidates))
            self._candidates.insert(position, extra)
            last_pos = position
        self._extras.clear()


def merge_extra_candidates(
    candidates: Iterable[Any],
    extras: Iterable[ExtraCandidate],
    page_size: int,
) -> list[Any]:
    """Merge ``extras`` into ``candidates`` the way the candidate list is built."""
    merger = CandidateMerger(extras, page_size)
    for candidate in candidates:
        merger.append(candidate)
    return merger.finish()


def stroke_candidate_start(page_size: int, count: int) -> int:
    """Position of the first stroke candidate: the last slots of the first page."""
    position = page_size - count
    if position < 0:
        position = page_size - 1
    return position


def trim_predict_history(words: Iterable[str]) -> list[str]:
    """Keep only the most recent words used for prediction."""
    history = list(words)
    return history[-MAX_PREDICT_HISTORY:]


def unique_custom_phrases(
    phrases: Iterable[CustomPhrase],
    evaluator: Optional[Evaluator] = None,
) -> list[ExtraCandidate]:
    """Evaluate custom phrases into extra candidates, dropping repeated texts.

    A phrase's order counts from one; the candidate's position from zero.
    """
    seen: set[str] = set()
    result: list[ExtraCandidate] = []
    for phrase in phrases:
        text = phrase.evaluate(evaluator)
        if text in seen:
            continue
        seen.add(text)
        result.append(ExtraCandidate(text, phrase.order - 1))
    return result