from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from category_report.cli import apply_overrides
from category_report.config import ProviderSettings, load_settings
from category_report.core.errors import ConfigurationError
from category_report.providers.coinmarketcap import BASE_URL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in (
        "CMC_API_KEY",
        "CMC_BASE_URL",
        "CMC_TIMEOUT",
        "CMC_MEMBER_LIMIT",
        "CMC_PAGINATE",
        "CMC_ALLOW_LIST_PATH",
        "CMC_FAIL_FAST",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.provider.api_key == ""
    assert settings.provider.base_url == BASE_URL
    assert settings.provider.member_limit == 100
    assert settings.provider.paginate is False
    assert settings.provider.allow_list_path is None
    assert settings.logging.level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CMC_API_KEY", "secret")
    monkeypatch.setenv("CMC_MEMBER_LIMIT", "250")
    monkeypatch.setenv("CMC_PAGINATE", "true")
    monkeypatch.setenv("CMC_ALLOW_LIST_PATH", "allow.yaml")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = load_settings()

    assert settings.provider.require_api_key() == "secret"
    assert settings.provider.member_limit == 250
    assert settings.provider.paginate is True
    assert settings.provider.allow_list_path == Path("allow.yaml")
    assert settings.logging.level == "DEBUG"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("CMC_API_KEY=from-dotenv\n")

    assert load_settings().provider.api_key == "from-dotenv"


def test_missing_api_key_is_configuration_error():
    with pytest.raises(ConfigurationError, match="CMC_API_KEY"):
        ProviderSettings().require_api_key()


def test_member_limit_bounds(monkeypatch):
    monkeypatch.setenv("CMC_MEMBER_LIMIT", "0")

    with pytest.raises(ValidationError):
        ProviderSettings()


def test_apply_overrides_ignores_unset_options():
    settings = load_settings()

    updated = apply_overrides(settings, member_limit=500, paginate=None, fail_fast=True)

    assert updated.provider.member_limit == 500
    assert updated.provider.paginate is False
    assert updated.provider.fail_fast is True
    assert settings.provider.member_limit == 100


@pytest.mark.parametrize(
    ("name", "value"),
    [("CMC_MEMBER_LIMIT", "0"), ("CMC_TIMEOUT", "abc"), ("CMC_PAGINATE", "maybe")],
)
def test_invalid_environment_is_configuration_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_settings()
