from pathlib import Path

import pytest
from pydantic import ValidationError

from parking_lot.config import AppConfig, LotConfig, LoggingConfig, get_config_path, load_config


def test_defaults():
    config = AppConfig()
    assert config.lot.capacity == 10
    assert config.lot.reject_duplicate_registrations is True
    assert config.logging.level == "INFO"


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "lot:\n"
        "  capacity: 25\n"
        "  reject_duplicate_registrations: false\n"
        "logging:\n"
        "  level: debug\n"
    )

    config = load_config(path)

    assert config.lot.capacity == 25
    assert config.lot.reject_duplicate_registrations is False
    assert config.logging.level == "DEBUG"


def test_load_config_accepts_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == AppConfig()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("capacity", [0, -1])
def test_lot_config_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValidationError):
        LotConfig(capacity=capacity)


def test_logging_config_rejects_unknown_level():
    with pytest.raises(ValidationError):
        LoggingConfig(level="chatty")


def test_get_config_path_honours_env(monkeypatch):
    monkeypatch.setenv("PARKING_LOT_CONFIG", "/etc/lot.yaml")
    assert get_config_path() == Path("/etc/lot.yaml")

    monkeypatch.delenv("PARKING_LOT_CONFIG")
    assert get_config_path() == Path("config/config.yaml")
