"""
Tests for environment-driven settings
"""

import pytest

import config


def test_env_int_default(monkeypatch):
    monkeypatch.delenv("COMPANY_TRACKER_TEST_PORT", raising=False)

    assert config._env_int("COMPANY_TRACKER_TEST_PORT", 5001) == 5001


def test_env_int_reads_environment(monkeypatch):
    monkeypatch.setenv("COMPANY_TRACKER_TEST_PORT", "8080")

    assert config._env_int("COMPANY_TRACKER_TEST_PORT", 5001) == 8080


def test_env_int_rejects_non_numeric(monkeypatch):
    monkeypatch.setenv("COMPANY_TRACKER_TEST_PORT", "eighty")

    with pytest.raises(RuntimeError, match="COMPANY_TRACKER_TEST_PORT must be an integer"):
        config._env_int("COMPANY_TRACKER_TEST_PORT", 5001)


def test_conftest_points_db_at_sqlite():
    assert config.DB_URL == "sqlite://"
    assert config.LOG_LEVEL == config.LOG_LEVEL.upper()
