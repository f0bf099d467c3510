"""Control logic for an LED matrix wall clock: settings, calendar, menu, screen layouts and sound level."""

__version__ = "0.1.0"