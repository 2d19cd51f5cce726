from __future__ import annotations

from typing import Any


class AttoscaleError(Exception):
    """Base error."""


# ============================================================
# Calendar errors
# ============================================================

class InvalidCalendarDate(AttoscaleError, ValueError):
    """A (year, month, day) triple that does not exist in some calendar."""

    calendar = "calendar"

    def __init__(self, year: int, month: int, day: int):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"{day} {int(month)} {year} does not exist in the {self.calendar}")


class InvalidHistoricDate(InvalidCalendarDate):
    calendar = "historic calendar"


class InvalidGregorianDate(InvalidCalendarDate):
    calendar = "proleptic Gregorian calendar"


class InvalidJulianDate(InvalidCalendarDate):
    calendar = "proleptic Julian calendar"


class InvalidMonthNumber(AttoscaleError, ValueError):
    def __init__(self, month: int):
        self.month = month
        super().__init__(f"invalid month number {month}")


class InvalidDayOfYear(AttoscaleError, ValueError):
    def __init__(self, year: int, day_of_year: int):
        self.year = year
        self.day_of_year = day_of_year
        super().__init__(f"day {day_of_year} does not exist in year {year}")


# ============================================================
# Time-of-day and leap second errors
# ============================================================

class InvalidTimeOfDay(AttoscaleError, ValueError):
    def __init__(self, hour: int, minute: int, second: int):
        self.hour = hour
        self.minute = minute
        self.second = second
        super().__init__(f"invalid time-of-day {hour:02}-{minute:02}-{second:02}")


class NonLeapSecondDateTime(AttoscaleError, ValueError):
    """Second 60 was requested at a moment where the scale inserts no leap second."""

    def __init__(self, scale: str, date: Any, hour: int, minute: int, second: int):
        self.scale = scale
        self.date = date
        self.hour = hour
        self.minute = minute
        self.second = second
        super().__init__(
            f"{scale} date-time {date} {hour:02}:{minute:02}:{second:02} is not a leap second"
        )


# ============================================================
# Composite date-time errors
# ============================================================

class InvalidDateTime(AttoscaleError, ValueError):
    """
    Wraps the error of one construction stage.

    `error` is either the calendar error (the date does not exist) or the
    time-of-day / leap second error raised by the scale itself.
    """

    calendar = "calendar"

    def __init__(self, error: Exception):
        self.error = error
        super().__init__(f"invalid {self.calendar} date-time: {error}")

    @property
    def is_date_error(self) -> bool:
        return isinstance(self.error, InvalidCalendarDate)


class InvalidHistoricDateTime(InvalidDateTime):
    calendar = "historic"


class InvalidGregorianDateTime(InvalidDateTime):
    calendar = "Gregorian"


class InvalidJulianDateTime(InvalidDateTime):
    calendar = "Julian"


# ============================================================
# Scale errors
# ============================================================

class UnsupportedConversion(AttoscaleError, TypeError):
    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"no conversion rule from {source} to {target}")


class NotUniformScale(AttoscaleError, TypeError):
    """Raised for operations only defined on scales without leap seconds."""

    def __init__(self, scale: str, operation: str):
        self.scale = scale
        self.operation = operation
        super().__init__(f"{operation} is not available for {scale}, which has leap seconds")


# ============================================================
# Parse errors
# ============================================================

class ParseError(AttoscaleError, ValueError):
    """Base of all textual parse errors; `position` indexes into `text`."""

    def __init__(self, message: str, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(f"{message} at position {position} in {text!r}")


class InvalidNumber(ParseError):
    def __init__(self, text: str, position: int):
        super().__init__("expected a number", text, position)


class UnexpectedRemainder(ParseError):
    def __init__(self, text: str, position: int):
        self.remainder = text[position:]
        super().__init__(f"unexpected trailing input {self.remainder!r}", text, position)


class ExpectedDurationPrefix(ParseError):
    def __init__(self, text: str, position: int = 0):
        super().__init__("expected duration prefix 'P'", text, position)


class ExpectedDurationDesignator(ParseError):
    def __init__(self, text: str, position: int):
        super().__init__("expected a duration designator (Y, M, D, H, S)", text, position)


class NonDecreasingDesignators(ParseError):
    """A designator appeared at or after a smaller unit; `current` names it."""

    def __init__(self, current: str, text: str, position: int):
        self.current = current
        super().__init__(f"{current} designator out of order", text, position)


class FractionNotLast(ParseError):
    def __init__(self, text: str, position: int):
        super().__init__("only the last duration component may carry a fraction", text, position)


class ExpectedDelimiter(ParseError):
    def __init__(self, expected: str, text: str, position: int):
        self.expected = expected
        super().__init__(f"expected {expected!r}", text, position)


class UnknownScaleAbbreviation(ParseError):
    def __init__(self, abbreviation: str, expected: str, text: str, position: int):
        self.abbreviation = abbreviation
        self.expected = expected
        super().__init__(f"expected scale {expected}, found {abbreviation!r}", text, position)
