"""Tests for the exception classes in cloparse."""

import pytest

from cloparse.exceptions import (
    AliasSpecError,
    CloParseError,
    InternalError,
    InvalidConfigError,
    InvalidValueError,
    IOStatusError,
    MissingOptionError,
    MissingValueError,
)


class TestExceptionsUnit:
    """Unit tests for the exception classes."""

    def test_base_error_message(self):
        error = CloParseError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert isinstance(error, Exception)

    @pytest.mark.parametrize(
        "error,expected",
        [
            (
                AliasSpecError("-v,--verbose"),
                "Invalid alias spec '-v,--verbose': aliases must be separated by spaces",
            ),
            (MissingOptionError("--model"), "Required option '--model' not given"),
            (MissingValueError("--level"), "Option '--level' requires a value"),
            (InvalidValueError("--level"), "Invalid value for option '--level'"),
            (
                InvalidValueError("--level", "abc"),
                "Invalid value for option '--level': 'abc'",
            ),
            (
                InvalidValueError("--level", "abc", "integer"),
                "Invalid value for option '--level': 'abc' (expected integer)",
            ),
            (
                InvalidConfigError("cloparse.conf", 3, "Unknown setting: 'x'"),
                "Invalid config in cloparse.conf at line 3: Unknown setting: 'x'",
            ),
            (
                InvalidConfigError("cloparse.conf"),
                "Invalid config in cloparse.conf: Invalid config format",
            ),
            (IOStatusError("reading", "Permission denied"), "reading: Permission denied"),
            (InternalError("not ok"), "not ok"),
        ],
    )
    def test_messages_and_hierarchy(self, error, expected):
        assert str(error) == expected
        assert isinstance(error, CloParseError)

    def test_attributes(self):
        assert AliasSpecError("a;b").alias_spec == "a;b"
        assert MissingOptionError("--model").option == "--model"
        assert MissingValueError("-r").option == "-r"
        assert InvalidValueError("--level", "abc", "integer").expected == "integer"
        error = InvalidConfigError("cloparse.conf", 7)
        assert error.path == "cloparse.conf"
        assert error.line_num == 7
