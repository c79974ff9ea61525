"""Unit tests for environment configuration.

Run with: pytest tests/test_config.py -v
"""

import pytest
from pydantic import ValidationError

from config.env import EnvSettings

ENV_VARS = [
    "DJANGO_SECRET_KEY",
    "DJANGO_DEBUG",
    "DJANGO_ALLOWED_HOSTS",
    "UPCOMING_EVENTS_DB_PATH",
    "UPCOMING_EVENTS_RANGE_DAYS",
    "UPCOMING_EVENTS_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestEnvSettings:
    """Tests for EnvSettings parsing and validation."""

    def test_defaults(self, clean_env):
        """Without environment variables the development defaults apply."""
        env = EnvSettings(_env_file=None)
        assert env.DJANGO_DEBUG is False
        assert env.UPCOMING_EVENTS_RANGE_DAYS == 30
        assert env.UPCOMING_EVENTS_LOG_LEVEL == "INFO"
        assert env.UPCOMING_EVENTS_DB_PATH is None

    def test_reads_typed_values(self, clean_env):
        """Values are parsed into their declared types."""
        clean_env.setenv("DJANGO_DEBUG", "true")
        clean_env.setenv("UPCOMING_EVENTS_RANGE_DAYS", "7")
        env = EnvSettings(_env_file=None)
        assert env.DJANGO_DEBUG is True
        assert env.UPCOMING_EVENTS_RANGE_DAYS == 7

    def test_allowed_hosts_split_on_commas(self, clean_env):
        """The host list is comma separated, blanks dropped."""
        clean_env.setenv("DJANGO_ALLOWED_HOSTS", "events.example.com, ,localhost")
        assert EnvSettings(_env_file=None).allowed_hosts == ["events.example.com", "localhost"]

    @pytest.mark.parametrize("value", ["abc", "-1"])
    def test_rejects_bad_range_days(self, clean_env, value):
        """Non-numeric or negative windows fail at startup."""
        clean_env.setenv("UPCOMING_EVENTS_RANGE_DAYS", value)
        with pytest.raises(ValidationError):
            EnvSettings(_env_file=None)

    def test_rejects_unknown_log_level(self, clean_env):
        """Only standard logging level names are accepted."""
        clean_env.setenv("UPCOMING_EVENTS_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            EnvSettings(_env_file=None)
