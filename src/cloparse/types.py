"""
Type aliases for cloparse.

This module provides centralized type definitions used throughout the package
to keep signatures consistent.

Type Aliases:
    ArgsList: List of string arguments (a token list)
    AliasList: Keywords split out of an alias spec
    ConfigData: Dictionary representing configuration data
    ExitCode: Integer representing exit codes
    VersionFields: The (major, minor, patch) triple of a version
    SplitResult: Tokens before and after a '--' separator
    OptionValues: Parsed option values keyed by option name
"""

from typing import Any, Dict, List, Tuple

ArgsList = List[str]
"""List of string arguments, e.g. a process argument vector without argv[0]."""

AliasList = List[str]
"""Alternative spellings of one option (e.g. ['-v', '--verbose'])."""

ConfigData = Dict[str, str]
"""Dictionary representing configuration data with string keys and values."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""

VersionFields = Tuple[int, int, int]
"""Tuple of (major, minor, patch) version components."""

SplitResult = Tuple[ArgsList, ArgsList]
"""Result of splitting arguments at separator (before, after)."""

OptionValues = Dict[str, Any]
"""Bound option values keyed by option name (flags map to a count)."""
