from pathlib import Path

import pytest

from gradlepropls.config import CATALOG_ENV, TRACE_ENV, ServerSettings


def test_defaults():
    settings = ServerSettings.from_env({})
    assert settings.catalog_path is None
    assert settings.trace is False


def test_catalog_from_env():
    settings = ServerSettings.from_env({CATALOG_ENV: "/etc/gradle/catalog.yml"})
    assert settings.catalog_path == Path("/etc/gradle/catalog.yml")


def test_blank_catalog_is_ignored():
    assert ServerSettings.from_env({CATALOG_ENV: "  "}).catalog_path is None


@pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " On "])
def test_trace_enabled(value):
    assert ServerSettings.from_env({TRACE_ENV: value}).trace is True


@pytest.mark.parametrize("value", ["", "0", "false", "off", "no", "maybe"])
def test_trace_disabled(value):
    assert ServerSettings.from_env({TRACE_ENV: value}).trace is False


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv(TRACE_ENV, "1")
    monkeypatch.delenv(CATALOG_ENV, raising=False)

    assert ServerSettings.from_env() == ServerSettings(trace=True)
