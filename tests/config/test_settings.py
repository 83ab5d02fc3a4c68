"""Tests for ServiceSettings."""

import pytest
from pydantic import ValidationError

from odataengine.config import ServiceSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ODATA_SERVICE_ROOT", "ODATA_LOGGER_NAME", "ODATA_MAX_TOP", "ODATA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = ServiceSettings()

    assert settings.service_root == ""
    assert settings.logger_name == "odataengine"
    assert settings.max_top is None
    assert settings.log_level == "WARNING"


def test_loads_from_environment(monkeypatch):
    monkeypatch.setenv("ODATA_SERVICE_ROOT", "https://example.com/odata/")
    monkeypatch.setenv("ODATA_MAX_TOP", "200")

    settings = ServiceSettings()

    assert settings.service_root == "https://example.com/odata"
    assert settings.max_top == 200


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("ODATA_LOGGER_NAME", "from.env")

    assert ServiceSettings(logger_name="explicit").logger_name == "explicit"


@pytest.mark.parametrize(
    ("root", "expected"), [("/odata/", "/odata"), ("/odata//", "/odata"), ("/", "")]
)
def test_trailing_slashes_are_stripped(root, expected):
    assert ServiceSettings(service_root=root).service_root == expected


def test_negative_max_top_rejected():
    with pytest.raises(ValidationError):
        ServiceSettings(max_top=-1)


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("ODATA_LOG_LEVEL", "debug")

    assert ServiceSettings().log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        ServiceSettings(log_level="chatty")
