from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, write_user_env_vars
from core.domain.language import Language


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.max_bound == 2**31 - 1
    assert settings.max_span == 1_000_000
    assert settings.strategy == "auto"
    assert settings.default_language is Language.ENGLISH
    assert settings.session_cookie_name == "primos_session"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRIMOS_MAX_SPAN", "250")
    monkeypatch.setenv("PRIMOS_DEFAULT_LANGUAGE", "es")
    monkeypatch.setenv("PRIMOS_LOG_LEVEL", "debug")
    settings = AppSettings(_env_file=None)
    assert settings.max_span == 250
    assert settings.default_language is Language.SPANISH
    assert settings.log_level == "DEBUG"


def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRIMOS_MAX_SPAN", "0")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_env_file_is_read(tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("PRIMOS_MAX_BOUND=1000\n", encoding="utf-8")
    assert AppSettings(_env_file=env_file).max_bound == 1000


def test_user_config_dir_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("core.config.sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "primos"


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"PRIMOS_MAX_SPAN": "10"}, env_path=env_path)
    write_user_env_vars({"PRIMOS_DEFAULT_LANGUAGE": "es"}, env_path=env_path)
    text = env_path.read_text(encoding="utf-8")
    assert "PRIMOS_MAX_SPAN=10" in text
    assert "PRIMOS_DEFAULT_LANGUAGE=es" in text
    assert text.startswith("# PRIMOS user config")


def test_language_parse() -> None:
    assert Language.parse("ES", Language.ENGLISH) is Language.SPANISH
    assert Language.parse("fr", Language.SPANISH) is Language.SPANISH
    assert Language.parse(None, Language.ENGLISH) is Language.ENGLISH
