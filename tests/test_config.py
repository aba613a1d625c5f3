"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from gh_activity.config import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings.from_env({})
        assert s.gh_binary == "gh"
        assert s.lookback_days == 7
        assert s.limit == 1000
        assert s.host == "github.com"

    def test_reads_prefixed_vars(self):
        s = Settings.from_env(
            {
                "GH_ACTIVITY_LOOKBACK_DAYS": "14",
                "GH_ACTIVITY_LIMIT": "200",
                "GH_ACTIVITY_HOST": "github.example.com",
            }
        )
        assert s.lookback_days == 14
        assert s.limit == 200
        assert s.host == "github.example.com"

    def test_gh_bin_alias(self):
        s = Settings.from_env({"GH_ACTIVITY_GH_BIN": "/opt/gh/bin/gh"})
        assert s.gh_binary == "/opt/gh/bin/gh"

    def test_blank_values_keep_defaults(self):
        s = Settings.from_env({"GH_ACTIVITY_LOOKBACK_DAYS": "  "})
        assert s.lookback_days == 7

    def test_invalid_value(self):
        with pytest.raises(ValidationError):
            Settings.from_env({"GH_ACTIVITY_LIMIT": "0"})

    def test_non_numeric_value(self):
        with pytest.raises(ValidationError):
            Settings.from_env({"GH_ACTIVITY_LOOKBACK_DAYS": "a week"})

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("GH_ACTIVITY_LOOKBACK_DAYS", "3")
        assert Settings.from_env().lookback_days == 3
