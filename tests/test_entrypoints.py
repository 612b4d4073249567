from __future__ import annotations

# ruff: noqa: S101
import importlib
import sys

import pytest

import manage


def test_manage_main_invokes_execute_from_command_line(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    called = {}

    def _fake_execute(argv: list[str]) -> None:
        called["argv"] = argv

    monkeypatch.setattr(
        "django.core.management.execute_from_command_line",
        _fake_execute,
    )
    monkeypatch.setattr(sys, "argv", ["manage.py", "check"])

    manage.main()

    assert called["argv"] == ["manage.py", "check"]


def test_asgi_application_importable() -> None:
    module = importlib.import_module("config.asgi")
    module = importlib.reload(module)
    assert module.application is not None


def test_wsgi_application_importable() -> None:
    module = importlib.import_module("config.wsgi")
    module = importlib.reload(module)
    assert module.application is not None


def test_mypy_settings_importable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("DJANGO_SECRET_KEY", "test-secret")
    monkeypatch.setenv("SQLITE_PATH", "mypy.sqlite3")

    module = importlib.import_module("config.mypy_settings")
    module = importlib.reload(module)

    assert module.DEBUG is False
    assert module.USE_TZ is True
    assert module.WEATHER_REPORT_TZ == "UTC"


def test_settings_read_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("DJANGO_DEBUG", "true")
    monkeypatch.setenv("DJANGO_ALLOWED_HOSTS", "farm.example.com, api.local")
    monkeypatch.setenv("WEATHER_REPORT_TZ", "Africa/Nairobi")
    monkeypatch.setenv("DJANGO_LOG_LEVEL", "debug")

    module = importlib.import_module("config.settings")
    try:
        module = importlib.reload(module)
        assert module.DEBUG is True
        assert module.ALLOWED_HOSTS == ["farm.example.com", "api.local"]
        assert module.WEATHER_REPORT_TZ == "Africa/Nairobi"
        assert module.LOGGING["loggers"]["weather"]["level"] == "DEBUG"
    finally:
        monkeypatch.undo()
        importlib.reload(module)
