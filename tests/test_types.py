"""Tests for the type definitions in cloparse."""

from cloparse.semantic_version import SemanticVersion
from cloparse.tokenizer import Tokenizer
from cloparse.types import ArgsList, ExitCode, SplitResult, VersionFields


class TestTypesUnit:
    """Unit tests for the type definitions."""

    def test_args_list_type(self):
        args: ArgsList = Tokenizer.split("-r 1.0 -- 2.0")
        assert isinstance(args, list)
        assert all(isinstance(item, str) for item in args)

    def test_version_fields_type(self):
        fields: VersionFields = SemanticVersion("1.2.3").as_tuple()
        assert fields == (1, 2, 3)
        assert all(isinstance(item, int) for item in fields)

    def test_split_result_type(self):
        result: SplitResult = (["-v"], ["app"])
        before, after = result
        assert before == ["-v"]
        assert after == ["app"]

    def test_exit_code_type(self):
        success_code: ExitCode = 0
        error_code: ExitCode = 1
        assert isinstance(success_code, int)
        assert error_code != success_code
