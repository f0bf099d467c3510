"""Calendar helpers and the clock's date/time record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MIN_VALID_YEAR = 2025
MAX_VALID_YEAR = 2099

_DAYS_IN_MONTH = {
    1: 31,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


@dataclass
class ClockTime:
    """Date and time as kept by the real-time clock.

    ``day_of_week`` runs from 1 (Sunday) to 7 (Saturday).
    """

    second: int = 0
    minute: int = 0
    hour: int = 0
    day_of_week: int = 1
    day: int = 1
    month: int = 1
    year: int = 2000


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _cdiv(a, b)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` of ``year``; unknown months count as 31."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _DAYS_IN_MONTH.get(month, 31)


def calculate_weekday(day: int, month: int, year: int) -> int:
    """Day of week by Zeller's congruence: 1 = Sunday ... 7 = Saturday."""
    if month < 3:
        month += 12
        year -= 1

    k = _cmod(year, 100)
    j = _cdiv(year, 100)

    h = _cmod(
        day + _cdiv(13 * (month + 1), 5) + k + _cdiv(k, 4) + _cdiv(j, 4) + 5 * j,
        7,
    )
    # Zeller gives 0 = Saturday; shift so that 1 = Sunday.
    return _cmod(h + 6, 7) + 1


def rtc_time_is_valid(time: Optional[ClockTime]) -> bool:
    """True when every field of ``time`` is in range and the year is 2025..2099."""
    if time is None:
        return False
    if not MIN_VALID_YEAR <= time.year <= MAX_VALID_YEAR:
        return False
    if not 1 <= time.month <= 12:
        return False
    if not 1 <= time.day <= days_in_month(time.month, time.year):
        return False
    if not 0 <= time.hour <= 23:
        return False
    if not 0 <= time.minute <= 59:
        return False
    if not 0 <= time.second <= 59:
        return False
    if not 1 <= time.day_of_week <= 7:
        return False
    return True