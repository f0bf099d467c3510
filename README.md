# zeitclock

Control logic for an LED matrix wall clock with a 64x32 panel, as a plain
Python library with no third-party dependencies.

## Modules

- `zeitclock.settings`: `SettingsStore`, a key/value store for the hour
  format, display mode, brightness level (clamped to 1..10) and a binary
  alarm-table blob. Values are kept in memory and, when a path is given,
  committed to a JSON file after each save. Errors are `SettingsError`,
  `SettingsNotFoundError` and `SettingsSizeError`.
- `zeitclock.clockdate`: `ClockTime` (day of week 1 = Sunday ... 7 =
  Saturday), `is_leap_year`, `days_in_month`, `calculate_weekday` and
  `rtc_time_is_valid` (years 2025..2099, every field in range).
- `zeitclock.display`: `HourFormat`, the scrolling date text
  (`date_scroll_text`), centring for the 5x7 and 6x9 fonts
  (`center_x_5x7`, `center_x_6x9`), hour/minute/second clamping,
  temperature colour and label (`temp_color`, `temp_text`) and
  `weekday_x_position`.
- `zeitclock.screens`: the layout of each screen as a list of drawing
  operations (`TextOp`, `ScrollOp`, fonts in `Font`): `mode_test_ops`,
  `mode1_ops`, `mode2_ops`, `mode3_ops` and `startup_ops`.
- `zeitclock.menu`: `ClockMenu`, the three-button (`Button.MENU`, `UP`,
  `DOWN`) menu for brightness, hour, minute, day, month and year, with a
  ten-second timeout, plus `brightness_level_to_hub75`. The RTC passed to it
  provides `get_time()` and `set_time(time)` and raises `OSError` on failure.
- `zeitclock.soundlevel`: `Biquad`, `AWeightingFilter` (16 kHz),
  `SplSmoother`, `rms_to_dbfs`, `convert_inmp441_sample`,
  `a_weighting_gain_db` and `SoundLevelMeter`, which turns blocks of stereo
  24-bit I2S frames into a calibrated dBA value.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from zeitclock.clockdate import ClockTime, calculate_weekday, days_in_month
from zeitclock.display import HourFormat, center_x_6x9, temp_text
from zeitclock.menu import brightness_level_to_hub75
from zeitclock.screens import mode1_ops
from zeitclock.soundlevel import rms_to_dbfs

calculate_weekday(27, 5, 2026)    # 4: Wednesday
days_in_month(2, 2024)            # 29
center_x_6x9("MENU")              # 18
temp_text(23.7, True, True)       # "23*C"
brightness_level_to_hub75(5)      # 127
rms_to_dbfs(1.0)                  # -120.0

now = ClockTime(second=5, minute=30, hour=14, day_of_week=4, day=27, month=5, year=2026)
for op in mode1_ops(now, 23.7, True, HourFormat.H24):
    print(op)
```

## What the package does not do

It is a library only: it installs no command and does not run a clock by
itself. It does not drive an LED panel, buttons, a real-time clock chip, a
temperature sensor or a microphone; screens are returned as drawing
operations and the menu talks to whatever RTC object it is given. It has no
alarm scheduling, no logo/screen rotation timing, and no network server or
remote-control command handling.