"""Drawing operations for each clock screen of the 64x32 panel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .display import (
    WEEKDAY_NAMES,
    HourFormat,
    center_x_5x7,
    date_scroll_text,
    display_hour,
    safe_minute,
    safe_second,
    temp_color,
    temp_text,
    weekday_x_position,
)

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
CYAN: Color = (0, 255, 255)

SCROLL_SPEED = 10
_DATE_BUFFER = 64


class Font(Enum):
    """Bitmap fonts available on the panel."""

    F6X9 = "6x9"
    F5X7 = "5x7"
    F5X5 = "5x5"
    F3X5 = "3x5"
    F2X9 = "2x9"
    F10X15 = "10x15"


@dataclass(frozen=True)
class TextOp:
    """Draw ``text`` at ``(x, y)`` in ``font`` and ``color``."""

    font: Font
    x: int
    y: int
    text: str
    color: Color


@dataclass(frozen=True)
class ScrollOp:
    """Scroll ``text`` along row ``y`` unless it is already scrolling."""

    text: str
    y: int
    color: Color
    speed: int = SCROLL_SPEED


Op = Union[TextOp, ScrollOp]


def _fit(text: str, size: int) -> str:
    """Text as it fits in a buffer of ``size`` bytes including the terminator."""
    return text[: size - 1]


def _clock_text(hour: int, minute: int, second: int) -> str:
    if hour < 10:
        return f" {hour:1d}:{minute:02d}:{second:02d}"
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def _date_scroll(time: Any, y: int, color: Color) -> ScrollOp:
    return ScrollOp(_fit(date_scroll_text(time), _DATE_BUFFER), y, color, SCROLL_SPEED)


def mode_test_ops(
    time: Any, temp_c: float, temp_valid: bool, fmt: HourFormat, db_value: int
) -> list[Op]:
    """Test screen: scrolling date, clock, temperature and sound level."""
    ops: list[Op] = [_date_scroll(time, 12, GREEN)]
    hour = display_hour(time, fmt)
    line1 = _fit(_clock_text(hour, safe_minute(time), safe_second(time)), 32)
    ops.append(TextOp(Font.F6X9, 4, 1, line1, WHITE))

    line2 = _fit(temp_text(temp_c, temp_valid, True), 16)
    line3 = _fit(f"{db_value}#dB", 16)
    if temp_valid:
        ops.append(TextOp(Font.F6X9, 2, 22, line2, temp_color(temp_c)))
        ops.append(TextOp(Font.F6X9, 35, 22, line3, RED))
    else:
        ops.append(TextOp(Font.F6X9, 18, 22, line3, RED))
    return ops


def mode1_ops(time: Any, temp_c: float, temp_valid: bool, fmt: HourFormat) -> list[Op]:
    """Mode 1: scrolling date, clock with seconds and temperature."""
    ops: list[Op] = [_date_scroll(time, 12, GREEN)]
    hour = display_hour(time, fmt)
    line1 = _fit(_clock_text(hour, safe_minute(time), safe_second(time)), 32)
    ops.append(TextOp(Font.F6X9, 4, 1, line1, WHITE))

    if temp_valid:
        line2 = _fit(temp_text(temp_c, True, True), 16)
        ops.append(TextOp(Font.F6X9, 20, 22, line2, temp_color(temp_c)))
    else:
        ops.append(TextOp(Font.F6X9, 20, 22, "T E", RED))
    return ops


def mode2_ops(time: Any, temp_c: float, temp_valid: bool, fmt: HourFormat) -> list[Op]:
    """Mode 2: big hour and minute, AM/PM or seconds, small temperature."""
    hour = display_hour(time, fmt)
    minute = safe_minute(time)
    second = safe_second(time)
    colon_on = second % 2 == 0
    color = temp_color(temp_c)

    ops: list[Op] = [_date_scroll(time, 2, BLUE)]

    if fmt == HourFormat.H12:
        ops.append(TextOp(Font.F5X5, 51, 16, "&$" if time.hour >= 12 else "#$", WHITE))
    else:
        ops.append(TextOp(Font.F5X5, 51, 16, f"{second:02d}", WHITE))

    minute_text = f"{minute:02d}"
    # A narrow "1" in the minute's last digit shifts the whole block right.
    pos_hour = 2 if minute % 10 == 1 else 0

    if hour < 10:
        pos_hour -= 1
        ops.append(TextOp(Font.F10X15, 9 + pos_hour, 14, str(hour), WHITE))
        ops.append(TextOp(Font.F10X15, 27 + pos_hour, 14, minute_text, WHITE))
        colon_x = 22 + pos_hour
    else:
        if hour > 19:
            pos_hour += 1
            if minute % 10 == 1:
                pos_hour -= 1
        ops.append(TextOp(Font.F10X15, pos_hour, 14, f"{hour:02d}", WHITE))
        ops.append(TextOp(Font.F10X15, 27 + pos_hour, 14, minute_text, WHITE))
        colon_x = 23 + pos_hour

    if fmt == HourFormat.H12:
        ops.append(TextOp(Font.F2X9, colon_x, 17, "!" if colon_on else " ", WHITE))
    else:
        ops.append(TextOp(Font.F2X9, colon_x, 17, "!", WHITE))

    if temp_valid:
        buf_temp = _fit(temp_text(temp_c, True, False), 20)
        ops.append(TextOp(Font.F3X5, 50, 26, buf_temp, color))
        ops.append(TextOp(Font.F2X9, 57, 26, "#", color))
        ops.append(TextOp(Font.F3X5, 60, 26, "$", color))
    else:
        ops.append(TextOp(Font.F3X5, 50, 26, "--", RED))
    return ops


def mode3_ops(time: Any, temp_c: float, temp_valid: bool, fmt: HourFormat) -> list[Op]:
    """Mode 3: weekday name, numeric date, clock and temperature."""
    color = temp_color(temp_c)
    dow = time.day_of_week
    weekday_index = dow - 1 if 1 <= dow <= 7 else 0

    ops: list[Op] = [
        TextOp(
            Font.F6X9,
            1 + weekday_x_position(weekday_index),
            1,
            WEEKDAY_NAMES[weekday_index],
            GREEN,
        ),
        TextOp(
            Font.F6X9,
            4,
            11,
            _fit(f"{time.day:02d}-{time.month:02d}-{time.year - 2000:02d}", 32),
            BLUE,
        ),
    ]

    hour = display_hour(time, fmt)
    minute = safe_minute(time)
    separator = ":" if safe_second(time) % 2 == 0 else " "
    if hour < 10:
        buf_time = f" {hour:1d}{separator}{minute:02d}"
    else:
        buf_time = f"{hour:02d}{separator}{minute:02d}"
    ops.append(TextOp(Font.F6X9, 2, 22, _fit(buf_time, 24), WHITE))

    if temp_valid:
        ops.append(TextOp(Font.F6X9, 43, 22, _fit(temp_text(temp_c, True, False), 16), color))
        ops.append(TextOp(Font.F6X9, 57, 22, "*", color))
    else:
        ops.append(TextOp(Font.F6X9, 43, 22, "TE", RED))
    return ops


def startup_ops(display_mode: int, brightness_level: int, fmt: HourFormat) -> list[Op]:
    """Settings summary shown after the logo at start-up."""
    line1 = _fit(f"MODO:{int(display_mode)}", 16)
    line2 = _fit(f"BRILLO:{int(brightness_level)}", 16)
    line3 = "24HRS:ON" if fmt == HourFormat.H24 else "24HRS:OFF"
    return [
        TextOp(Font.F5X7, center_x_5x7(line1), 1, line1, RED),
        TextOp(Font.F5X7, center_x_5x7(line2), 11, line2, GREEN),
        TextOp(Font.F5X7, center_x_5x7(line3), 22, line3, CYAN),
    ]