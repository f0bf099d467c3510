"""Persistent clock settings: hour format, display mode, brightness and alarm table."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

log = logging.getLogger(__name__)

NAMESPACE = "clock_cfg"
KEY_FORMAT = "format"
KEY_MODE = "mode"
KEY_BRIGHTNESS = "brightness"
KEY_ETH_ALARMS = "eth_alarms"

MIN_BRIGHTNESS = 1
MAX_BRIGHTNESS = 10


class SettingsError(Exception):
    """Base error for settings storage failures."""


class SettingsNotFoundError(SettingsError):
    """The requested stored value does not exist."""


class SettingsSizeError(SettingsError):
    """A stored blob does not have the expected size."""

    def __init__(self, key: str, got: int, expected: int) -> None:
        super().__init__(f"blob {key!r} size mismatch: got={got} expected={expected}")
        self.key = key
        self.got = got
        self.expected = expected


class SettingsStore:
    """Key/value store of small integers and binary blobs.

    Values live in memory; when a path is given they are also committed to a
    JSON file after every save and read back on construction. An unreadable
    file is treated as erased storage and the store starts empty.
    """

    def __init__(self, path: Optional[Union[str, os.PathLike]] = None) -> None:
        self._path = Path(path) if path is not None else None
        self._values: dict[str, int] = {}
        self._blobs: dict[str, bytes] = {}
        if self._path is not None and self._path.exists():
            self._read()

    # ------------------------------------------------------------------ file

    def _read(self) -> None:
        assert self._path is not None
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
            section = document[NAMESPACE]
            values = {str(k): int(v) for k, v in section.get("u8", {}).items()}
            blobs = {str(k): bytes.fromhex(v) for k, v in section.get("blob", {}).items()}
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            log.warning("Settings file %s unreadable (%s); starting empty", self._path, exc)
            return
        self._values = {k: v for k, v in values.items() if 0 <= v <= 0xFF}
        self._blobs = blobs

    def _commit(self) -> None:
        if self._path is None:
            return
        document = {
            NAMESPACE: {
                "u8": dict(self._values),
                "blob": {k: v.hex() for k, v in self._blobs.items()},
            }
        }
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(document, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            try:
                tmp.unlink()
            except OSError:
                pass
            raise SettingsError(f"cannot write settings to {self._path}: {exc}") from exc

    # ------------------------------------------------------------ u8 values

    def _save_u8(self, key: str, value: int) -> None:
        value = int(value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{key} value {value} does not fit in one byte")
        self._values[key] = value
        try:
            self._commit()
        except SettingsError as exc:
            log.error("Save failed for key %r: %s", key, exc)
            return
        log.info("Saved %s=%d", key, value)

    def _load_u8(self, key: str, default: int) -> int:
        value = self._values.get(key)
        if value is None:
            log.warning("Key %r not found, using default %d", key, default)
            return default
        return value

    def save_format(self, fmt: int) -> None:
        """Store the hour format (0 = 12H, 1 = 24H)."""
        self._save_u8(KEY_FORMAT, fmt)

    def load_format(self, default: int) -> int:
        """Return the stored hour format, or ``default`` when absent."""
        return self._load_u8(KEY_FORMAT, default)

    def save_mode(self, mode: int) -> None:
        """Store the display mode."""
        self._save_u8(KEY_MODE, mode)

    def load_mode(self, default: int) -> int:
        """Return the stored display mode, or ``default`` when absent."""
        return self._load_u8(KEY_MODE, default)

    def save_brightness(self, level: int) -> None:
        """Store the brightness level, clamped to 1..10."""
        level = max(MIN_BRIGHTNESS, min(MAX_BRIGHTNESS, int(level)))
        self._save_u8(KEY_BRIGHTNESS, level)

    def load_brightness(self, default: int) -> int:
        """Return the stored brightness level; out-of-range or absent gives ``default``."""
        value = self._load_u8(KEY_BRIGHTNESS, default)
        if not MIN_BRIGHTNESS <= value <= MAX_BRIGHTNESS:
            return default
        return value

    # ---------------------------------------------------------------- blobs

    def save_ethernet_alarms(self, data: bytes) -> None:
        """Store the packed alarm table. Raises SettingsError if it cannot be committed."""
        blob = bytes(data)
        if not blob:
            raise ValueError("alarm table blob must not be empty")
        self._blobs[KEY_ETH_ALARMS] = blob
        self._commit()
        log.info("Saved blob %s, size=%d", KEY_ETH_ALARMS, len(blob))

    def load_ethernet_alarms(self, size: int) -> bytes:
        """Return the stored alarm table, which must be exactly ``size`` bytes."""
        if size <= 0:
            raise ValueError("expected blob size must be positive")
        blob = self._blobs.get(KEY_ETH_ALARMS)
        if blob is None:
            raise SettingsNotFoundError(f"blob {KEY_ETH_ALARMS!r} not found")
        if len(blob) != size:
            raise SettingsSizeError(KEY_ETH_ALARMS, len(blob), size)
        return blob