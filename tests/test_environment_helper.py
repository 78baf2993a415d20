"""Tests for the environment helper functionality in cloparse."""

import pytest

from cloparse.environment_helper import EnvironmentHelper, debug_log


class TestEnvironmentHelperUnit:
    """Unit tests for the EnvironmentHelper class."""

    def test_debug_log_no_output_when_disabled(self, capsys, clean_env):
        """Test that debug_log doesn't output when CLOPARSE_DEBUG is not set."""
        debug_log("test message")
        captured = capsys.readouterr()
        assert "test message" not in captured.err

    @pytest.mark.parametrize(
        "debug_value", ["1", "true", "yes", "on", "TRUE", "YES", "ON"]
    )
    def test_debug_log_outputs_when_enabled(self, capsys, monkeypatch, debug_value):
        """Test that debug_log outputs when CLOPARSE_DEBUG is set to truthy values."""
        monkeypatch.setenv("CLOPARSE_DEBUG", debug_value)
        debug_log("debug test message")
        captured = capsys.readouterr()
        assert "[DEBUG] debug test message" in captured.err

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("-v -r 1.0", ["-v", "-r", "1.0"]),
            ("  --sort  ", ["--sort"]),
            ("", []),
        ],
    )
    def test_get_extra_args(self, clean_env, value, expected):
        clean_env.setenv("CLOPARSE_OPTS", value)
        assert EnvironmentHelper.get_extra_args() == expected

    def test_get_extra_args_unset(self, clean_env):
        assert EnvironmentHelper.get_extra_args() == []

    @pytest.mark.parametrize(
        "value,expected",
        [("3", 3), (" 1 ", 1), ("", None), ("0", None), ("-2", None), ("x", None)],
    )
    def test_get_short_option_length(self, clean_env, value, expected):
        clean_env.setenv("CLOPARSE_SHORT_OPTION_LENGTH", value)
        assert EnvironmentHelper.get_short_option_length() == expected

    def test_get_short_option_length_unset(self, clean_env):
        assert EnvironmentHelper.get_short_option_length() is None
