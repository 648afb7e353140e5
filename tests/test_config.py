import pytest
from pydantic import ValidationError

from bitfour.core.config import DisplaySettings, EventSettings, get_settings, reset_settings


def test_defaults():
    settings = get_settings()
    assert settings.logging.level == "WARNING"
    assert settings.events.max_log_size == 100
    assert settings.events.log_enabled
    assert settings.display.player_a_symbol == "X"
    assert settings.display.player_b_symbol == "O"


def test_singleton():
    assert get_settings() is get_settings()
    first = get_settings()
    reset_settings()
    assert get_settings() is not first


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DISPLAY_PLAYER_A_SYMBOL", "R")
    reset_settings()
    settings = get_settings()
    assert settings.logging.level == "DEBUG"
    assert settings.display.player_a_symbol == "R"


def test_validation():
    with pytest.raises(ValidationError):
        EventSettings(max_log_size=0)
    with pytest.raises(ValidationError):
        DisplaySettings(empty_symbol="--")


def test_dotenv_file_overrides_defaults(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text(
        "LOG_LEVEL=DEBUG\nEVENTS_MAX_LOG_SIZE=7\nDISPLAY_PLAYER_A_SYMBOL=R\n",
        encoding="utf-8",
    )
    for name in ("LOG_LEVEL", "EVENTS_MAX_LOG_SIZE", "DISPLAY_PLAYER_A_SYMBOL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()

    settings = get_settings()
    assert settings.logging.level == "DEBUG"
    assert settings.events.max_log_size == 7
    assert settings.display.player_a_symbol == "R"
    assert settings.display.player_b_symbol == "O"
