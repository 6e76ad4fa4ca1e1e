"""Tests for settings loading"""
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from toptrumps.config import Settings, load_settings


def test_defaults_with_empty_env():
    assert load_settings({}) == Settings()


def test_reads_env_values():
    settings = load_settings({
        "TOPTRUMPS_SEED": "42",
        "TOPTRUMPS_LOG_LEVEL": "debug",
        "TOPTRUMPS_CLEAR_SCREEN": "no",
        "TOPTRUMPS_BANNER_DELAY": "0",
        "TOPTRUMPS_COLOR": "off",
    })
    assert settings.seed == 42
    assert settings.log_level == "DEBUG"
    assert settings.clear_screen is False
    assert settings.banner_delay == 0.0
    assert settings.color is False


def test_blank_values_fall_back_to_defaults():
    settings = load_settings({"TOPTRUMPS_SEED": "", "TOPTRUMPS_COLOR": " "})
    assert settings.seed is None
    assert settings.color is True


@pytest.mark.parametrize("key,value", [
    ("TOPTRUMPS_SEED", "forty-two"),
    ("TOPTRUMPS_BANNER_DELAY", "soon"),
    ("TOPTRUMPS_BANNER_DELAY", "-1"),
    ("TOPTRUMPS_CLEAR_SCREEN", "maybe"),
])
def test_malformed_values_raise(key, value):
    with pytest.raises(ValueError):
        load_settings({key: value})


def test_loads_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("TOPTRUMPS_SEED=7\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TOPTRUMPS_SEED", raising=False)

    try:
        assert load_settings().seed == 7
    finally:
        os.environ.pop("TOPTRUMPS_SEED", None)
