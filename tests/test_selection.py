import pytest

from zhphrase.selection import (
    NOT_HANDLED,
    SecondThirdSelector,
    SelectionOutcome,
    select_char_from_phrase,
)


@pytest.fixture
def selector():
    return SecondThirdSelector()


def test_plain_key_selects_second_on_press(selector):
    outcome = selector.handle([0, -1], is_release=False, is_modifier=False)
    assert outcome == SelectionOutcome(True, True, 1)


def test_plain_key_selects_third_on_press(selector):
    outcome = selector.handle([-1, 0], is_release=False, is_modifier=False)
    assert outcome == SelectionOutcome(True, True, 2)


def test_release_of_plain_key_is_swallowed(selector):
    selector.handle([0, -1], is_release=False, is_modifier=False)
    outcome = selector.handle([0, -1], is_release=True, is_modifier=False)
    assert outcome.handled
    assert not outcome.accepted
    assert outcome.select is None


def test_modifier_selects_on_release(selector):
    press = selector.handle([-1, 1], is_release=False, is_modifier=True)
    assert press == SelectionOutcome(True, False, None)
    assert selector.pending
    release = selector.handle([-1, 1], is_release=True, is_modifier=True)
    assert release == SelectionOutcome(True, True, 2)
    assert not selector.pending


def test_release_without_press_is_not_handled(selector):
    assert selector.handle([0, -1], is_release=True, is_modifier=True) == NOT_HANDLED


def test_release_of_other_key_is_not_handled(selector):
    selector.handle([0, -1], is_release=False, is_modifier=True)
    assert selector.handle([1, -1], is_release=True, is_modifier=True) == NOT_HANDLED
    assert not selector.pending


def test_unrelated_key_press_is_not_handled(selector):
    assert selector.handle([-1, -1], is_release=False, is_modifier=False) == NOT_HANDLED
    assert not selector.pending


def test_intervening_key_cancels_pending_release(selector):
    selector.handle([0, -1], is_release=False, is_modifier=True)
    selector.handle([-1, -1], is_release=False, is_modifier=False)
    assert selector.handle([0, -1], is_release=True, is_modifier=True) == NOT_HANDLED


def test_reset_forgets_press(selector):
    selector.handle([0, -1], is_release=False, is_modifier=True)
    selector.reset()
    assert not selector.pending
    assert selector.handle([0, -1], is_release=True, is_modifier=True) == NOT_HANDLED


def test_first_matching_list_wins(selector):
    outcome = selector.handle([2, 0], is_release=False, is_modifier=False)
    assert outcome.select == 1


@pytest.mark.parametrize("index, expected", [(0, "中"), (1, "文")])
def test_select_char_from_phrase(index, expected):
    assert select_char_from_phrase("中文", index) == expected


def test_select_char_out_of_range():
    assert select_char_from_phrase("中", 1) is None
    assert select_char_from_phrase("", 0) is None


def test_select_char_negative_index():
    with pytest.raises(ValueError):
        select_char_from_phrase("中文", -1)