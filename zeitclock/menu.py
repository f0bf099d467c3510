"""Button-driven settings menu for brightness, time and date."""

from __future__ import annotations

import logging
import time as _time
from dataclasses import replace
from enum import IntEnum
from typing import Any, Callable, Optional

from .clockdate import ClockTime, calculate_weekday, days_in_month
from .display import center_x_6x9

log = logging.getLogger(__name__)

MENU_TIMEOUT_US = 10 * 1_000_000


class Button(IntEnum):
    """Front-panel buttons."""

    MENU = 0
    UP = 1
    DOWN = 2


class MenuState(IntEnum):
    """Field currently being edited."""

    IDLE = 0
    BRIGHTNESS = 1
    HOUR = 2
    MINUTE = 3
    DAY = 4
    MONTH = 5
    YEAR = 6


def _monotonic_us() -> int:
    return _time.monotonic_ns() // 1000


def brightness_level_to_hub75(level: int) -> int:
    """Map a 1..10 brightness level to the panel's 0..255 scale."""
    level = max(1, min(10, int(level)))
    return (level * 255) // 10


class ClockMenu:
    """State machine of the settings menu.

    ``rtc`` offers ``get_time()`` and ``set_time(time)`` and raises OSError on
    failure. ``brightness_level`` is the saved level and
    ``temporal_brightness`` the value being edited.
    """

    def __init__(
        self,
        rtc: Any = None,
        *,
        settings: Any = None,
        set_brightness: Optional[Callable[[int], None]] = None,
        show_message: Optional[Callable[[str, int], None]] = None,
        on_time_saved: Optional[Callable[[ClockTime], None]] = None,
        on_scroll_stop: Optional[Callable[[], None]] = None,
        clock: Callable[[], int] = _monotonic_us,
        brightness_level: int = 5,
    ) -> None:
        self._rtc = rtc
        self._settings = settings
        self._set_brightness = set_brightness
        self._show_message = show_message
        self._on_time_saved = on_time_saved
        self._on_scroll_stop = on_scroll_stop
        self._clock = clock
        self.brightness_level = brightness_level
        self.temporal_brightness = brightness_level
        self._active = False
        self._state = MenuState.IDLE
        self._last_action = 0
        self._tmp = ClockTime()

    # ------------------------------------------------------------- helpers

    @property
    def state(self) -> MenuState:
        """Field currently being edited."""
        return self._state

    @property
    def pending_time(self) -> ClockTime:
        """Copy of the date and time being edited."""
        return replace(self._tmp)

    def _message(self, text: str, duration_ms: int) -> None:
        if self._show_message is not None:
            self._show_message(text, duration_ms)

    def _scroll_stop(self) -> None:
        if self._on_scroll_stop is not None:
            self._on_scroll_stop()

    def _apply_brightness(self, level: int) -> None:
        if self._set_brightness is not None:
            self._set_brightness(brightness_level_to_hub75(level))

    def _refresh_timeout(self) -> None:
        self._last_action = self._clock()

    def _clamp_day(self) -> None:
        max_day = days_in_month(self._tmp.month, self._tmp.year)
        self._tmp.day = max(1, min(max_day, self._tmp.day))

    def _update_weekday(self) -> None:
        self._tmp.day_of_week = calculate_weekday(self._tmp.day, self._tmp.month, self._tmp.year)

    def _exit(self) -> None:
        self._active = False
        self._state = MenuState.IDLE
        self._scroll_stop()

    # -------------------------------------------------------------- public

    def is_active(self) -> bool:
        """True while the menu is open."""
        return self._active

    def enter(self) -> None:
        """Open the menu on the brightness field, starting from the RTC time."""
        if self._rtc is None:
            return
        try:
            self._tmp = replace(self._rtc.get_time())
        except OSError as exc:
            log.error("Cannot enter menu: failed to read RTC: %s", exc)
            return
        self.temporal_brightness = self.brightness_level
        self._active = True
        self._state = MenuState.BRIGHTNESS
        self._refresh_timeout()
        self._scroll_stop()
        self._message("MENU", 500)

    def cancel(self) -> None:
        """Close the menu without saving and restore the saved brightness."""
        self.temporal_brightness = self.brightness_level
        self._apply_brightness(self.brightness_level)
        self._active = False
        self._state = MenuState.IDLE
        self._scroll_stop()
        self._message("SALIR", 1000)

    def check_timeout(self) -> None:
        """Cancel the menu after ten seconds without a button press."""
        if self._active and self._clock() - self._last_action > MENU_TIMEOUT_US:
            self.cancel()
            log.info("Menu timeout -> exit without saving")

    def _save(self) -> None:
        if self._rtc is None:
            return
        self._tmp.second = 0
        self._clamp_day()
        self._update_weekday()
        saved = replace(self._tmp)
        try:
            self._rtc.set_time(saved)
        except OSError as exc:
            self._message("ERROR", 1000)
            log.error("Failed to save RTC time: %s", exc)
        else:
            if self._on_time_saved is not None:
                self._on_time_saved(replace(saved))
            self.brightness_level = self.temporal_brightness
            self._apply_brightness(self.brightness_level)
            if self._settings is not None:
                self._settings.save_brightness(self.brightness_level)
            self._message("GUARDADO", 1000)
        self._exit()

    def handle_button(self, button: Button) -> None:
        """Apply one button press to the field being edited."""
        self._refresh_timeout()
        tmp = self._tmp
        state = self._state

        if state == MenuState.BRIGHTNESS:
            if button == Button.UP and self.temporal_brightness < 10:
                self.temporal_brightness += 1
                self._apply_brightness(self.temporal_brightness)
            if button == Button.DOWN and self.temporal_brightness > 1:
                self.temporal_brightness -= 1
                self._apply_brightness(self.temporal_brightness)
            if button == Button.MENU:
                self._state = MenuState.HOUR

        elif state == MenuState.HOUR:
            if button == Button.UP:
                tmp.hour = (tmp.hour + 1) % 24
            if button == Button.DOWN:
                tmp.hour = (tmp.hour + 23) % 24
            if button == Button.MENU:
                self._state = MenuState.MINUTE

        elif state == MenuState.MINUTE:
            if button == Button.UP:
                tmp.minute = (tmp.minute + 1) % 60
            if button == Button.DOWN:
                tmp.minute = (tmp.minute + 59) % 60
            if button == Button.MENU:
                self._state = MenuState.DAY

        elif state == MenuState.DAY:
            max_day = days_in_month(tmp.month, tmp.year)
            if button == Button.UP:
                tmp.day += 1
                if tmp.day > max_day:
                    tmp.day = 1
            if button == Button.DOWN:
                tmp.day -= 1
                if tmp.day < 1:
                    tmp.day = max_day
            self._update_weekday()
            if button == Button.MENU:
                self._state = MenuState.MONTH

        elif state == MenuState.MONTH:
            if button == Button.UP:
                tmp.month = (tmp.month % 12) + 1
                self._clamp_day()
            if button == Button.DOWN:
                tmp.month = ((tmp.month + 10) % 12) + 1
                self._clamp_day()
            self._update_weekday()
            if button == Button.MENU:
                self._state = MenuState.YEAR

        elif state == MenuState.YEAR:
            if button == Button.UP:
                tmp.year = 2000 + ((tmp.year - 2000 + 1) % 100)
                self._clamp_day()
            if button == Button.DOWN:
                tmp.year = 2000 + ((tmp.year - 2000 + 99) % 100)
                self._clamp_day()
            self._update_weekday()
            if button == Button.MENU:
                self._save()

    def render_text(self) -> tuple[int, str]:
        """X position and text of the menu line for the current field."""
        tmp = self._tmp
        state = self._state
        if state == MenuState.BRIGHTNESS:
            text = f"BRILLO:{self.temporal_brightness}"
        elif state == MenuState.HOUR:
            text = f"HORA:{tmp.hour:02d}"
        elif state == MenuState.MINUTE:
            text = f"MIN:{tmp.minute:02d}"
        elif state == MenuState.DAY:
            text = f"DIA:{tmp.day:02d}"
        elif state == MenuState.MONTH:
            text = f"MES:{tmp.month:02d}"
        elif state == MenuState.YEAR:
            text = f"A|O:{tmp.year - 2000:02d}"
        else:
            text = "MENU"
        x = 1 if state == MenuState.BRIGHTNESS else center_x_6x9(text)
        return x, text