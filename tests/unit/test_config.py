"""Tests for environment configuration."""

import os

import pytest

from onegoal.config.env_loader import (
    DEFAULT_IMPORT_MAX_BYTES,
    EnvironmentError,
    get_environment,
    get_import_max_bytes,
    get_users_collection,
    is_emulator,
    load_environment,
)


def test_defaults():
    """Test the default settings."""
    assert get_environment() == "development"
    assert get_users_collection() == "users"
    assert get_import_max_bytes() == DEFAULT_IMPORT_MAX_BYTES
    assert is_emulator() is False


def test_overrides(monkeypatch):
    """Environment variables override the defaults."""
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("ONEGOAL_USERS_COLLECTION", "users_staging")
    monkeypatch.setenv("ONEGOAL_IMPORT_MAX_BYTES", "2048")
    monkeypatch.setenv("FUNCTIONS_EMULATOR", "true")

    assert get_environment() == "production"
    assert get_users_collection() == "users_staging"
    assert get_import_max_bytes() == 2048
    assert is_emulator() is True


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_invalid_import_limit(monkeypatch, value):
    """Non-positive or non-numeric limits are rejected."""
    monkeypatch.setenv("ONEGOAL_IMPORT_MAX_BYTES", value)
    with pytest.raises(EnvironmentError):
        get_import_max_bytes()


def test_load_environment_from_file(tmp_path):
    """Settings are loaded from a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("ONEGOAL_USERS_COLLECTION=from_file\n")

    try:
        assert load_environment(str(env_file)) is True
        assert get_users_collection() == "from_file"
    finally:
        os.environ.pop("ONEGOAL_USERS_COLLECTION", None)


def test_load_environment_without_file(tmp_path):
    """A missing .env file is reported."""
    assert load_environment(str(tmp_path / "missing.env")) is False
