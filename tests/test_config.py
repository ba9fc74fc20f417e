"""Tests for configuration and logging setup."""

from __future__ import annotations

import pytest
import structlog

from schedule_export import config
from schedule_export.config import ExportSettings, get_settings
from schedule_export.logging import get_logger, setup_logging


class TestExportSettings:
    """Tests for ExportSettings."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = ExportSettings()
        assert settings.master_template.endswith("جدول_رئيسي_template.xlsx")
        assert settings.schedule_template.endswith("جداول_template_new.xlsx")
        assert settings.output_dir == "exports"
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SCHEDULE_EXPORT_SCHEDULE_TEMPLATE", "https://school.example/t.xlsx")
        monkeypatch.setenv("SCHEDULE_EXPORT_FETCH_TIMEOUT", "5")

        settings = ExportSettings()

        assert settings.schedule_template == "https://school.example/t.xlsx"
        assert settings.fetch_timeout == 5.0

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setattr(config, "_settings", None)
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for structlog configuration."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_console_logging(self, capsys):
        setup_logging(json_output=False, log_level="DEBUG")
        get_logger("test").info("export_completed", sheets=2)

        assert "export_completed" in capsys.readouterr().err

    def test_json_logging(self, capsys):
        setup_logging(json_output=True, log_level="INFO")
        get_logger("test").info("export_completed", filename="الجدول_الرئيسي.xlsx")

        err = capsys.readouterr().err
        assert '"event": "export_completed"' in err
        assert "الجدول_الرئيسي.xlsx" in err

    def test_level_filtering(self, capsys):
        setup_logging(log_level="WARNING")
        get_logger("test").info("hidden_event")

        assert "hidden_event" not in capsys.readouterr().err
