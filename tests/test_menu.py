from dataclasses import replace

import pytest

from zeitclock.clockdate import ClockTime, calculate_weekday, days_in_month
from zeitclock.display import center_x_6x9
from zeitclock.menu import Button, ClockMenu, MenuState, brightness_level_to_hub75
from zeitclock.settings import SettingsStore


class FakeRtc:
    def __init__(self, time, fail_get=False, fail_set=False):
        self.time = time
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.saved = []

    def get_time(self):
        if self.fail_get:
            raise OSError("read failed")
        return replace(self.time)

    def set_time(self, time):
        if self.fail_set:
            raise OSError("write failed")
        self.saved.append(time)


class FakeClock:
    def __init__(self):
        self.now = 5_000_000

    def __call__(self):
        return self.now


START = ClockTime(30, 15, 7, 4, 10, 6, 2026)


@pytest.fixture
def env():
    rtc = FakeRtc(START)
    messages, levels, saved_times = [], [], []
    clock = FakeClock()
    settings = SettingsStore()
    menu = ClockMenu(
        rtc,
        settings=settings,
        set_brightness=levels.append,
        show_message=lambda m, d: messages.append(m),
        on_time_saved=saved_times.append,
        clock=clock,
        brightness_level=5,
    )
    return menu, rtc, messages, levels, saved_times, clock, settings


def test_brightness_mapping_clamps():
    assert brightness_level_to_hub75(10) == 255
    assert brightness_level_to_hub75(11) == brightness_level_to_hub75(10)
    assert brightness_level_to_hub75(0) == brightness_level_to_hub75(1)
    values = [brightness_level_to_hub75(i) for i in range(1, 11)]
    assert values == sorted(values)


def test_enter_opens_brightness_field(env):
    menu, _, messages, *_ = env
    menu.enter()
    assert menu.is_active()
    assert menu.state == MenuState.BRIGHTNESS
    assert messages == ["MENU"]
    assert menu.pending_time == START


def test_enter_fails_when_rtc_unreadable(env):
    menu, rtc, messages, *_ = env
    rtc.fail_get = True
    menu.enter()
    assert not menu.is_active()
    assert messages == []


def test_brightness_limits(env):
    menu, _, _, levels, *_ = env
    menu.enter()
    for _ in range(8):
        menu.handle_button(Button.UP)
    assert menu.temporal_brightness == 10
    assert levels[-1] == brightness_level_to_hub75(10)
    for _ in range(12):
        menu.handle_button(Button.DOWN)
    assert menu.temporal_brightness == 1
    assert menu.brightness_level == 5


def test_full_navigation_saves(env):
    menu, rtc, messages, _, saved_times, _, settings = env
    menu.enter()
    menu.handle_button(Button.UP)
    for _ in range(6):
        menu.handle_button(Button.MENU)
    assert not menu.is_active()
    assert rtc.saved[-1] == replace(START, second=0, day_of_week=calculate_weekday(10, 6, 2026))
    assert saved_times == rtc.saved
    assert messages[-1] == "GUARDADO"
    assert menu.brightness_level == 6
    assert settings.load_brightness(5) == 6


def test_hour_wraps(env):
    menu, *_ = env
    menu.enter()
    menu.handle_button(Button.MENU)
    for _ in range(8):
        menu.handle_button(Button.DOWN)
    assert menu.pending_time.hour == 23
    menu.handle_button(Button.UP)
    assert menu.pending_time.hour == 0


def test_day_wraps_down_to_month_end(env):
    menu, rtc, *_ = env
    rtc.time = replace(START, day=1)
    menu.enter()
    for _ in range(3):
        menu.handle_button(Button.MENU)
    menu.handle_button(Button.DOWN)
    t = menu.pending_time
    assert t.day == days_in_month(6, 2026)
    assert t.day_of_week == calculate_weekday(t.day, 6, 2026)


def test_month_change_clamps_day(env):
    menu, rtc, *_ = env
    rtc.time = replace(START, day=31, month=1)
    menu.enter()
    for _ in range(4):
        menu.handle_button(Button.MENU)
    assert menu.state == MenuState.MONTH
    menu.handle_button(Button.UP)
    t = menu.pending_time
    assert t.month == 2
    assert t.day == days_in_month(2, 2026)


def test_cancel_restores_brightness(env):
    menu, _, messages, levels, *_ = env
    menu.enter()
    menu.handle_button(Button.UP)
    menu.cancel()
    assert menu.temporal_brightness == 5
    assert levels[-1] == brightness_level_to_hub75(5)
    assert messages[-1] == "SALIR"
    assert not menu.is_active()


def test_timeout_cancels(env):
    menu, _, messages, _, _, clock, _ = env
    menu.enter()
    clock.now += 10_000_000
    menu.check_timeout()
    assert menu.is_active()
    clock.now += 1
    menu.check_timeout()
    assert not menu.is_active()
    assert messages[-1] == "SALIR"


def test_render_text(env):
    menu, *_ = env
    menu.enter()
    assert menu.render_text() == (1, "BRILLO:5")
    menu.handle_button(Button.MENU)
    assert menu.render_text() == (center_x_6x9("HORA:07"), "HORA:07")


def test_save_failure_shows_error(env):
    menu, rtc, messages, _, saved_times, *_ = env
    rtc.fail_set = True
    menu.enter()
    for _ in range(6):
        menu.handle_button(Button.MENU)
    assert messages[-1] == "ERROR"
    assert saved_times == []
    assert not menu.is_active()