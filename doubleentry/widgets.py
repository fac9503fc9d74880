"""Calendar layout helpers and the pop-up calculator's key-driven state."""

from __future__ import annotations

import calendar
import datetime
import math
import re
from enum import Enum

_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_MAX_DIGITS = 8


def is_leap(year: int) -> bool:
    """True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")


def days_in_month(month: int, year: int) -> int:
    """Number of days in `month` (1-12) of `year`."""
    _check_month(month)
    if month == 2 and is_leap(year):
        return 29
    return _DAYS[month - 1]


def start_day(month: int, year: int) -> int:
    """Weekday of the first of the month: 0 is Sunday, 6 is Saturday."""
    _check_month(month)
    return (datetime.date(year, month, 1).weekday() + 1) % 7


def month_grid(month: int, year: int) -> list[list[int | None]]:
    """Weeks of the month, Sunday first; days before the 1st are None.

    Every week but the last has seven cells; the last stops at the final day.
    """
    first = start_day(month, year)
    weeks: list[list[int | None]] = []
    week: list[int | None] = [None] * first
    for day in range(1, days_in_month(month, year) + 1):
        week.append(day)
        if (first + day) % 7 == 0:
            weeks.append(week)
            week = []
    if week:
        weeks.append(week)
    return weeks


def month_name(month: int) -> str:
    """English name of `month` (1-12)."""
    _check_month(month)
    return calendar.month_name[month]


class _Operator(Enum):
    NONE = "none"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"


_OPERATOR_KEYS = {
    "+": _Operator.ADD,
    "-": _Operator.SUBTRACT,
    "x": _Operator.MULTIPLY,
    "*": _Operator.MULTIPLY,
    "/": _Operator.DIVIDE,
}


def _leading_number(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    return float(match.group()) if match else 0.0


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def format_result(value: float) -> str:
    """Show a result with two significant digits."""
    return "%.2g" % value


class Calculator:
    """A four-function calculator driven one key at a time.

    Digits and '.' enter a number of at most eight characters; '+', '-',
    'x' or '*', and '/' pick an operator; '=' evaluates; 'D' deletes the
    last character; 'C' clears; 'Q' quits and keeps the last answer in
    `result`.
    """

    def __init__(self) -> None:
        self.first = 0.0
        self.second = 0.0
        self.answer = 0.0
        self.result = 0.0
        self.running = True
        self._operator = _Operator.NONE
        self._entry = ""
        self._shown = ""
        self._replace_on_next_digit = False

    def display(self) -> str:
        """The text currently shown on the calculator's display line."""
        return self._shown

    def press(self, key: str) -> bool:
        """Handle one key; return whether the calculator is still running."""
        if len(key) != 1:
            raise ValueError("press takes exactly one character")
        if not self.running:
            raise RuntimeError("the calculator has been closed")

        if key.isdigit() and key.isascii() or key == ".":
            self._enter(key)
        elif key in "qQ":
            self.running = False
            self.result = self.answer
        elif key in "dD":
            self._entry = self._entry[:-1]
            self._shown = self._entry
        elif key in "cC":
            self.first = self.second = self.answer = 0.0
            self._operator = _Operator.NONE
            self._shown = ""
        else:
            self._operate(key)
            self._entry = ""
        return self.running

    def _enter(self, key: str) -> None:
        if self._replace_on_next_digit:
            self._entry = ""
            self._shown = ""
            self._replace_on_next_digit = False
        if len(self._entry) >= _MAX_DIGITS:
            return
        self._entry += key
        self._shown = self._entry

    def _operate(self, key: str) -> None:
        operator = _OPERATOR_KEYS.get(key)
        if operator is not None:
            self.first = _leading_number(self._entry)
            self._shown = f"{self._entry} {operator.value}"
            self._operator = operator
            self._replace_on_next_digit = True
        elif key == "=":
            self.second = _leading_number(self._entry)
            if self._operator is _Operator.ADD:
                self.answer = self.first + self.second
            elif self._operator is _Operator.SUBTRACT:
                self.answer = self.first - self.second
            elif self._operator is _Operator.MULTIPLY:
                self.answer = self.first * self.second
            elif self._operator is _Operator.DIVIDE:
                self.answer = _divide(self.first, self.second)
            self._shown = format_result(self.answer)
            self.first = self.answer