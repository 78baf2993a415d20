#!/usr/bin/env python3
"""Main application orchestrator for cloparse."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .argument_processor import ArgumentProcessor, OptionSpec, ParsedArgs
from .config_manager import ConfigManager
from .config_result import ConfigResult
from .diagnostics import check_io_status
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import CloParseError
from .join_formatter import JoinFormatter
from .semantic_version import SemanticVersion
from .tokenizer import Tokenizer
from .types import ArgsList, ExitCode

TOOL_VERSION = SemanticVersion(0, 1, 0)

OPTIONS = [
    OptionSpec("help", "-h --help"),
    OptionSpec("version", "--version"),
    OptionSpec("verbose", "-v --verbose"),
    OptionSpec("sort", "-s --sort"),
    OptionSpec("require", "-r --require", target=str),
    OptionSpec("file", "-f --file", target=str, multiple=True),
    OptionSpec("limit", "-n --limit", target=int),
]


def print_help() -> None:
    """Print concise help message about cloparse functionality."""
    help_text = """cloparse - version gate
Usage:
  cloparse -r 1.2.0 1.4.1 1.1.9           # Check versions against a minimum
  cloparse -r1.2.0 -f versions.txt        # Short options take attached values
  cloparse --require 2.0 --sort -v 2.1 1.9
  cloparse -n 2 -- 1.0.0 2.0.0 3.0.0      # Everything after -- is a version

Options:
  -h, --help             Show this message
  --version              Show the cloparse version
  -v, --verbose          Print one line per checked version
  -s, --sort             Check versions in ascending order
  -r, --require VERSION  Minimum version (default 0.0.0)
  -f, --file PATH        Read whitespace-separated versions from PATH
  -n, --limit N          Only check the first N versions

  Config file: $XDG_CONFIG_HOME/cloparse.conf or $HOME/.config/cloparse.conf
  Config format: KEY=VALUE (short_option_length, default_args, require)
  Supports CLOPARSE_OPTS=... and CLOPARSE_SHORT_OPTION_LENGTH=... overrides
"""
    print(help_text)


class Application:
    """Main application orchestrator."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self.config_manager = config_manager or ConfigManager()

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        try:
            config = self._load_config()
            full_args = self._merge_args(args, config)
            if not full_args:
                print_help()
                return 0

            parsed = self._parse_args(full_args, config)

            if parsed["help"]:
                print_help()
                return 0
            if parsed["version"]:
                print(f"cloparse {TOOL_VERSION}")
                return 0

            return self._check_versions(parsed, config)
        except CloParseError as e:
            logging.error(str(e))
            return 1

    def _load_config(self) -> ConfigResult:
        config_file = self.config_manager.find_config_file()
        if not config_file:
            debug_log("run: no config file found")
            return ConfigResult()
        debug_log(f"run: loading config from {config_file}")
        return self.config_manager.load_config(config_file)

    @staticmethod
    def _merge_args(args: ArgsList, config: ConfigResult) -> ArgsList:
        """Config defaults, then CLOPARSE_OPTS, then the command line."""
        full_args = config.default_args + EnvironmentHelper.get_extra_args() + args
        debug_log(f"run: parsing {full_args}")
        return full_args

    @staticmethod
    def _parse_args(full_args: ArgsList, config: ConfigResult) -> ParsedArgs:
        short_length = EnvironmentHelper.get_short_option_length()
        if short_length is None:
            short_length = config.short_option_length
        return ArgumentProcessor(OPTIONS, short_length).parse(full_args)

    def _check_versions(self, parsed: ParsedArgs, config: ConfigResult) -> ExitCode:
        words = list(parsed.positionals)
        for path in parsed["file"]:
            self._read_versions(Path(path), words)

        if not words:
            logging.error("No versions given (see --help)")
            return 1

        limit = parsed["limit"]
        if limit is not None and limit < 0:
            logging.error(f"--limit must not be negative, got {limit}")
            return 1

        require = SemanticVersion(parsed["require"] or config.require or "0.0.0")
        versions = [SemanticVersion(word) for word in words]
        if parsed["sort"]:
            versions.sort()
        if limit is not None:
            versions = versions[:limit]

        too_old = 0
        for version in versions:
            if version < require:
                too_old += 1
                status = f"too old (requires >= {require})"
            else:
                status = "ok"
            if parsed["verbose"]:
                print(f"{version}: {status}")

        summary = JoinFormatter()
        summary(len(versions) - too_old, " ok")
        summary(too_old, " too old")
        print(summary.text if summary else "nothing checked")

        return 1 if too_old else 0

    @staticmethod
    def _read_versions(path: Path, words: ArgsList) -> None:
        """Append the whitespace-separated versions found in a file."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            check_io_status(False, f"Cannot read version file {path}", error=e)
            return
        Tokenizer.split(text, words)


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv[1:])
    except CloParseError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
