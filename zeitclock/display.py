"""Text and layout helpers for the 64-pixel-wide clock panel."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

PANEL_WIDTH = 64

WEEKDAY_NAMES = (
    "DOMINGO",
    "LUNES",
    "MARTES",
    "MIERCOLES",
    "JUEVES",
    "VIERNES",
    "SABADO",
)

MONTH_NAMES = (
    "ENERO",
    "FEBRERO",
    "MARZO",
    "ABRIL",
    "MAYO",
    "JUNIO",
    "JULIO",
    "AGOSTO",
    "SEPTIEMBRE",
    "OCTUBRE",
    "NOVIEMBRE",
    "DICIEMBRE",
)

_WEEKDAY_X = (6, 14, 10, 0, 10, 6, 10)

_DATE_TEXT_MAX = 63


class HourFormat(IntEnum):
    """Hour display format."""

    H12 = 0
    H24 = 1


def _weekday_index(time: Any) -> int:
    dow = time.day_of_week
    return dow - 1 if 1 <= dow <= 7 else 0


def _month_index(time: Any) -> int:
    month = time.month
    return month - 1 if 1 <= month <= 12 else 0


def date_scroll_text(time: Any) -> str:
    """Return the scrolling date line, e.g. ``LUNES 3 MARZO 2025``."""
    text = (
        f"{WEEKDAY_NAMES[_weekday_index(time)]} {time.day} "
        f"{MONTH_NAMES[_month_index(time)]} {time.year:04d}"
    )
    return text[:_DATE_TEXT_MAX]


def _center(text: Optional[str], advance: int) -> int:
    width = len(text or "") * advance
    if width >= PANEL_WIDTH:
        return 0
    return (PANEL_WIDTH - width) // 2


def center_x_5x7(text: Optional[str]) -> int:
    """X position that centres ``text`` in the 5x7 font (6 px per character)."""
    return _center(text, 6)


def center_x_6x9(text: Optional[str]) -> int:
    """X position that centres ``text`` in the 6x9 font (7 px per character)."""
    return _center(text, 7)


def display_hour(time: Any, fmt: HourFormat) -> int:
    """Hour to show: clamped to 0..23, converted to 1..12 for 12-hour format."""
    hour = max(0, min(23, int(time.hour)))
    if fmt == HourFormat.H24:
        return hour
    return hour % 12 or 12


def safe_minute(time: Any) -> int:
    """Minute clamped to 0..59."""
    return max(0, min(59, int(time.minute)))


def safe_second(time: Any) -> int:
    """Second clamped to 0..59."""
    return max(0, min(59, int(time.second)))


def temp_color(temp_c: float) -> tuple[int, int, int]:
    """RGB colour used to draw a temperature."""
    if temp_c < 10.0:
        return (255, 255, 255)
    if temp_c < 20.0:
        return (0, 255, 255)
    if temp_c < 30.0:
        return (255, 65, 0)
    return (255, 0, 0)


def temp_text(temp_c: float, valid: bool, with_c: bool) -> str:
    """Temperature label; the value is truncated toward zero."""
    if valid:
        value = int(temp_c)
        return f"{value}*C" if with_c else f"{value}"
    return "-" if with_c else "T E"


def weekday_x_position(index: int) -> int:
    """Hand-tuned x offset for a weekday name in the 6x9 font."""
    if 0 <= index < len(_WEEKDAY_X):
        return _WEEKDAY_X[index]
    return 0