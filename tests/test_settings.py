import pytest

from zeitclock.settings import (
    MAX_BRIGHTNESS,
    MIN_BRIGHTNESS,
    SettingsError,
    SettingsNotFoundError,
    SettingsSizeError,
    SettingsStore,
)


def test_defaults_when_empty():
    store = SettingsStore()
    assert store.load_format(0) == 0
    assert store.load_mode(4) == 4
    assert store.load_brightness(5) == 5


def test_format_and_mode_round_trip():
    store = SettingsStore()
    store.save_format(1)
    store.save_mode(3)
    assert store.load_format(0) == 1
    assert store.load_mode(1) == 3


def test_brightness_clamped_on_save():
    store = SettingsStore()
    store.save_brightness(0)
    assert store.load_brightness(5) == MIN_BRIGHTNESS
    store.save_brightness(99)
    assert store.load_brightness(5) == MAX_BRIGHTNESS
    store.save_brightness(7)
    assert store.load_brightness(5) == 7


def test_u8_out_of_range_rejected():
    store = SettingsStore()
    with pytest.raises(ValueError):
        store.save_mode(256)
    with pytest.raises(ValueError):
        store.save_format(-1)


def test_blob_round_trip():
    store = SettingsStore()
    data = bytes(range(12))
    store.save_ethernet_alarms(data)
    assert store.load_ethernet_alarms(len(data)) == data


def test_blob_missing_raises_not_found():
    store = SettingsStore()
    with pytest.raises(SettingsNotFoundError):
        store.load_ethernet_alarms(360)


def test_blob_size_mismatch():
    store = SettingsStore()
    store.save_ethernet_alarms(b"\x01\x02\x03")
    with pytest.raises(SettingsSizeError) as info:
        store.load_ethernet_alarms(6)
    assert info.value.got == 3
    assert info.value.expected == 6
    assert isinstance(info.value, SettingsError)


def test_empty_blob_rejected():
    store = SettingsStore()
    with pytest.raises(ValueError):
        store.save_ethernet_alarms(b"")
    with pytest.raises(ValueError):
        store.load_ethernet_alarms(0)


def test_persistence_across_instances(tmp_path):
    path = tmp_path / "settings.json"
    first = SettingsStore(path)
    first.save_format(1)
    first.save_brightness(8)
    first.save_ethernet_alarms(b"\xaa\xbb")
    second = SettingsStore(path)
    assert second.load_format(0) == 1
    assert second.load_brightness(5) == 8
    assert second.load_ethernet_alarms(2) == b"\xaa\xbb"


def test_corrupt_file_starts_empty(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    store = SettingsStore(path)
    assert store.load_mode(2) == 2
    store.save_mode(3)
    assert SettingsStore(path).load_mode(2) == 3


def test_blob_commit_failure_raises(tmp_path):
    target = tmp_path / "dir_target"
    target.mkdir()
    store = SettingsStore(target)
    with pytest.raises(SettingsError):
        store.save_ethernet_alarms(b"\x01")


def test_u8_commit_failure_is_logged_not_raised(tmp_path):
    target = tmp_path / "dir_target"
    target.mkdir()
    store = SettingsStore(target)
    store.save_mode(2)
    assert store.load_mode(1) == 2