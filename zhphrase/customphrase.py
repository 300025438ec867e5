"""Custom phrase dictionary: parsing, evaluation of dynamic phrases and saving."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import IO, Optional

_INT32_MAX = 2**31 - 1
_DIGITS = "0123456789"
_CHINESE_YEAR_DIGITS = ("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九")
_CHINESE_WEEKDAYS = ("日", "一", "二", "三", "四", "五", "六")
_CHINESE_NUMBER_DIGITS = (
    "零", "一", "二", "三", "四", "五", "六", "七", "八", "九", "十",
)

Evaluator = Callable[[str], str]


def _is_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def _is_digit(c: str) -> bool:
    return c != "" and c in _DIGITS


class _State(enum.Enum):
    NORMAL = enum.auto()
    VARIABLE_START = enum.auto()
    BRACED_VARIABLE = enum.auto()
    VARIABLE = enum.auto()


@dataclass
class CustomPhrase:
    """A phrase bound to a key, with its position among the candidates."""

    order: int
    value: str

    def evaluate(self, evaluator: Optional[Evaluator] = None) -> str:
        """Expand ``$name`` and ``${name}`` variables of a ``#``-prefixed value."""
        if evaluator is None:
            evaluator = builtin_evaluator
        if not self.value.startswith("#"):
            return self.value

        output: list[str] = []
        name = ""
        state = _State.NORMAL
        for c in self.value[1:]:
            if state is _State.VARIABLE:
                if _is_alpha(c) or _is_digit(c) or c == "_":
                    name += c
                    continue
                output.append(evaluator(name))
                state = _State.NORMAL

            if state is _State.NORMAL:
                if c == "$":
                    state = _State.VARIABLE_START
                else:
                    output.append(c)
            elif state is _State.VARIABLE_START:
                if c == "{":
                    name = ""
                    state = _State.BRACED_VARIABLE
                elif c == "$":
                    output.append("$")
                    state = _State.NORMAL
                elif _is_alpha(c) or c == "_":
                    name = c
                    state = _State.VARIABLE
            elif state is _State.BRACED_VARIABLE:
                if c == "}":
                    output.append(evaluator(name))
                    state = _State.NORMAL
                else:
                    name += c

        if state is _State.VARIABLE:
            output.append(evaluator(name))
        return "".join(output)


def normalize_data(phrases: list[CustomPhrase]) -> None:
    """Sort phrases by order (stably) and make positive orders strictly increasing."""
    phrases.sort(key=lambda phrase: phrase.order)
    if not phrases:
        return
    current = phrases[0].order
    for phrase in phrases[1:]:
        if current > 0 and phrase.order <= current:
            phrase.order = current + 1
        current = phrase.order


def parse_custom_phrase_line(line: str) -> Optional[tuple[str, int, str]]:
    """Parse ``key,[-]order=value``; return ``(key, order, value)`` or None."""
    i = 0
    size = len(line)
    while i < size and _is_alpha(line[i]):
        i += 1
    if i == 0:
        return None
    key = line[:i]
    if i >= size or line[i] != ",":
        return None
    i += 1
    sign = 1
    if i < size and line[i] == "-":
        sign = -1
        i += 1
    order_start = i
    while i < size and _is_digit(line[i]):
        i += 1
    if i == order_start or i >= size or line[i] != "=":
        return None

    order = int(line[order_start:i])
    if order > _INT32_MAX:
        order = 0
    # Zero is not a valid order.
    if order == 0:
        return None
    return key, order * sign, line[i + 1:]


def is_comment(line: str) -> bool:
    """Whether the line is a comment (starts with ``;`` or ``#``)."""
    return line.startswith((";", "#"))


def escape_for_value(value: str) -> str:
    """Escape a value for storage, quoting it if it holds blanks or quotes."""
    needs_quote = any(c in " \f\r\t\v\"" for c in value)
    escaped = (
        value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')
    )
    return f'"{escaped}"' if needs_quote else escaped


def unescape_for_value(value: str) -> Optional[str]:
    """Reverse :func:`escape_for_value`; return None on an invalid escape."""
    unquote = len(value) >= 2 and value.startswith('"') and value.endswith('"')
    if unquote:
        value = value[1:-1]
    result: list[str] = []
    escaping = False
    for c in value:
        if not escaping:
            if c == "\\":
                escaping = True
            else:
                result.append(c)
            continue
        if c == "\\":
            result.append("\\")
        elif c == "n":
            result.append("\n")
        elif c == '"' and unquote:
            result.append('"')
        else:
            return None
        escaping = False
    if escaping:
        return None
    return "".join(result)


def to_chinese_year(digits: str) -> str:
    """Spell each decimal digit with its Chinese numeral."""
    if not all(_is_digit(c) for c in digits):
        raise ValueError(f"not a digit string: {digits!r}")
    return "".join(_CHINESE_YEAR_DIGITS[int(c)] for c in digits)


def to_chinese_weekday(num: int) -> str:
    """Chinese name of a weekday, with 0 for Sunday."""
    if not 0 <= num < 7:
        raise ValueError(f"weekday out of range: {num}")
    return _CHINESE_WEEKDAYS[num]


def to_chinese_two_digit_number(num: int, leading_zero: bool = False) -> str:
    """Write a number between 0 and 99 in Chinese numerals."""
    if not 0 <= num < 100:
        raise ValueError(f"number out of range: {num}")
    if num == 0:
        return _CHINESE_NUMBER_DIGITS[0]
    tens, ones = divmod(num, 10)
    if tens == 0:
        prefix = _CHINESE_NUMBER_DIGITS[0] if leading_zero else ""
    elif tens == 1:
        prefix = _CHINESE_NUMBER_DIGITS[10]
    else:
        prefix = _CHINESE_NUMBER_DIGITS[tens] + _CHINESE_NUMBER_DIGITS[10]
    suffix = _CHINESE_NUMBER_DIGITS[ones] if ones else ""
    return prefix + suffix


def _half_hour(now: datetime) -> int:
    hour = now.hour % 12
    return 12 if hour == 0 else hour


def _weekday(now: datetime) -> int:
    return now.isoweekday() % 7


_BUILTINS: dict[str, Callable[[datetime], str]] = {
    "year": lambda t: str(t.year),
    "year_yy": lambda t: f"{t.year % 100:02d}",
    "month": lambda t: str(t.month),
    "month_mm": lambda t: f"{t.month:02d}",
    "day": lambda t: str(t.day),
    "day_dd": lambda t: f"{t.day:02d}",
    "weekday": lambda t: str(_weekday(t)),
    "fullhour": lambda t: f"{t.hour:02d}",
    "halfhour": lambda t: f"{_half_hour(t):02d}",
    "ampm": lambda t: "AM" if t.hour < 12 else "PM",
    "minute": lambda t: f"{t.minute:02d}",
    "second": lambda t: f"{t.second:02d}",
    "year_cn": lambda t: to_chinese_year(str(t.year)),
    "year_yy_cn": lambda t: to_chinese_year(f"{t.year % 100:02d}"),
    "month_cn": lambda t: to_chinese_two_digit_number(t.month, False),
    "day_cn": lambda t: to_chinese_two_digit_number(t.day, False),
    "weekday_cn": lambda t: to_chinese_weekday(_weekday(t)),
    "fullhour_cn": lambda t: to_chinese_two_digit_number(t.hour, False),
    "halfhour_cn": lambda t: to_chinese_two_digit_number(_half_hour(t), False),
    "ampm_cn": lambda t: "上午" if t.hour < 12 else "下午",
    "minute_cn": lambda t: to_chinese_two_digit_number(t.minute, True),
    "second_cn": lambda t: to_chinese_two_digit_number(t.second, True),
}


def builtin_evaluator(key: str, now: Optional[datetime] = None) -> str:
    """Value of a built-in date/time variable, or an empty string if unknown."""
    func = _BUILTINS.get(key)
    if func is None:
        return ""
    return func(now if now is not None else datetime.now())


def _iter_lines(source: IO[str] | Iterable[str] | str) -> Iterator[str]:
    if isinstance(source, str):
        parts = source.split("\n")
        if source.endswith("\n"):
            parts.pop()
        yield from parts
        return
    for line in source:
        yield line[:-1] if line.endswith("\n") else line


class CustomPhraseDict:
    """Phrases grouped by their key."""

    def __init__(self) -> None:
        self._data: dict[str, list[CustomPhrase]] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()

    def lookup(self, key: str) -> Optional[list[CustomPhrase]]:
        """Phrases for ``key`` in order, or None if the key is unknown."""
        return self._data.get(key)

    def add_phrase(self, key: str, value: str, order: int) -> None:
        self._data.setdefault(key, []).append(CustomPhrase(order, value))

    def items(self) -> Iterator[tuple[str, list[CustomPhrase]]]:
        """Yield ``(key, phrases)`` pairs, keys in sorted order."""
        for key in sorted(self._data):
            yield key, self._data[key]

    def load(
        self,
        stream: IO[str] | Iterable[str] | str,
        load_disabled: bool = False,
    ) -> None:
        """Replace the contents with the phrases read from ``stream``."""
        self.clear()
        disabled = CustomPhrase(-1, "")
        multiline: Optional[CustomPhrase] = None

        def finish_multiline() -> None:
            nonlocal multiline
            if multiline is not None and multiline.value:
                multiline.value = multiline.value[:-1]
            multiline = None

        for line in _iter_lines(stream):
            if multiline is None and is_comment(line):
                continue

            parsed = parse_custom_phrase_line(line)
            if parsed is not None:
                finish_multiline()
                key, order, data = parsed
                value = data
                if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                    unescaped = unescape_for_value(value)
                    if unescaped is not None:
                        value = unescaped

                if not load_disabled and order < 0:
                    if not data:
                        multiline = disabled
                    continue

                phrase = CustomPhrase(order, value)
                self._data.setdefault(key, []).append(phrase)
                if not data:
                    multiline = phrase
            elif multiline is not None and multiline is not disabled:
                # The trailing newline is dropped when the block ends.
                multiline.value += line + "\n"

        finish_multiline()
        for phrases in self._data.values():
            normalize_data(phrases)

    def save(self, out: IO[str]) -> None:
        """Write all phrases to ``out`` in the format :meth:`load` reads."""
        for key, phrases in self.items():
            for phrase in phrases:
                escaped = escape_for_value(phrase.value)
                out.write(f"{key},{phrase.order}=")
                if len(escaped) != len(phrase.value):
                    if not escaped.startswith('"'):
                        out.write('"')
                    out.write(escaped)
                    if not escaped.endswith('"'):
                        out.write('"')
                else:
                    out.write(phrase.value)
                out.write("\n")