from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file


def test_defaults(isolated_cwd, monkeypatch):
    for name in (
        "PATTERN_DEMOS_DEFERRED_DELAY_SECONDS",
        "PATTERN_DEMOS_REPORT_SAMPLE_DATA",
        "PATTERN_DEMOS_REPORT_OUTPUT_PATH",
        "PATTERN_DEMOS_LOG_LEVEL",
        "PATTERN_DEMOS_SHOW_BANNER",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.deferred_delay_seconds == 2.0
    assert settings.report_sample_data == "Sample Data"
    assert settings.report_output_path == Path("report.txt")
    assert settings.log_level == "WARNING"
    assert settings.show_banner is True


def test_environment_overrides(isolated_cwd, monkeypatch):
    monkeypatch.setenv("PATTERN_DEMOS_DEFERRED_DELAY_SECONDS", "0.5")
    monkeypatch.setenv("PATTERN_DEMOS_REPORT_OUTPUT_PATH", "out/custom.txt")
    monkeypatch.setenv("PATTERN_DEMOS_LOG_LEVEL", "debug")
    monkeypatch.setenv("PATTERN_DEMOS_SHOW_BANNER", "false")

    settings = AppSettings(_env_file=None)

    assert settings.deferred_delay_seconds == 0.5
    assert settings.report_output_path == Path("out/custom.txt")
    assert settings.log_level == "DEBUG"
    assert settings.show_banner is False


def test_env_file_in_project_dir(isolated_cwd, monkeypatch):
    monkeypatch.delenv("PATTERN_DEMOS_REPORT_SAMPLE_DATA", raising=False)
    (isolated_cwd / ".env").write_text(
        "PATTERN_DEMOS_REPORT_SAMPLE_DATA=From Env File\n", encoding="utf-8"
    )

    assert AppSettings().report_sample_data == "From Env File"


def test_negative_delay_is_rejected(isolated_cwd):
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, deferred_delay_seconds=-1)


def test_unknown_log_level_is_rejected(isolated_cwd):
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="verbose")


def test_user_env_file_location():
    assert get_user_env_file().name == ".env"
    assert get_user_env_file().parent.name == "pattern-demos"
