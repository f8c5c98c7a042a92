"""Calendar helpers and the conversion of access-log times to epoch seconds."""

from __future__ import annotations

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_UINT32_MASK = 0xFFFFFFFF

# Field positions in a time string shaped like "03/Jul/1995:10:55:30 -0400".
_DAY = slice(0, 2)
_MONTH = slice(3, 6)
_YEAR = slice(7, 11)
_HOUR = slice(12, 14)
_MINUTE = slice(15, 17)
_SECOND = slice(18, 20)
_ZONE = slice(21, 24)


def parse_uint(text: str) -> int:
    """Read the decimal digits of ``text`` as an unsigned 32-bit number.

    Characters that are not digits are skipped; the value wraps modulo 2**32.
    """
    number = 0
    for char in text:
        if "0" <= char <= "9":
            number = (number * 10 + ord(char) - ord("0")) & _UINT32_MASK
    return number


def is_leap(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_index(name: str) -> int:
    """Return 1 to 12 for an English month abbreviation, or 0 if unknown."""
    try:
        return MONTHS.index(name) + 1
    except ValueError:
        return 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days of ``month`` (1 to 12) in ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def parse_timestamp(text: str) -> int:
    """Convert a time such as ``"03/Jul/1995:10:55:30 -0400"`` to seconds.

    The zone's hours are subtracted when it starts with ``-`` and added
    otherwise; its minutes are ignored.
    """
    year = parse_uint(text[_YEAR])
    month = month_index(text[_MONTH])

    days = sum(366 if is_leap(y) else 365 for y in range(1970, year))
    days += sum(days_in_month(year, m) for m in range(1, month))
    days += parse_uint(text[_DAY]) - 1

    seconds = days * 24 * 3600
    seconds += parse_uint(text[_HOUR]) * 3600
    seconds += parse_uint(text[_MINUTE]) * 60
    seconds += parse_uint(text[_SECOND])

    zone = text[_ZONE]
    offset = parse_uint(zone) * 3600
    if zone.startswith("-"):
        seconds -= offset
    else:
        seconds += offset
    return seconds