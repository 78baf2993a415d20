"""Environment variable operations for cloparse."""

import os
import sys

from .tokenizer import Tokenizer
from .types import ArgsList

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when CLOPARSE_DEBUG=1 is set."""
    if os.environ.get("CLOPARSE_DEBUG", "").lower() in TRUTHY_VALUES:
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def get_extra_args() -> ArgsList:
        """Get extra command-line arguments from CLOPARSE_OPTS."""
        return Tokenizer.split(os.environ.get("CLOPARSE_OPTS", ""))

    @staticmethod
    def get_short_option_length() -> int | None:
        """
        Get the short keyword length override from the environment.

        Returns None when CLOPARSE_SHORT_OPTION_LENGTH is unset, empty or not
        a positive integer.
        """
        raw = os.environ.get("CLOPARSE_SHORT_OPTION_LENGTH", "").strip()
        if not raw:
            return None
        try:
            length = int(raw)
        except ValueError:
            debug_log(f"get_short_option_length: ignoring non-integer value '{raw}'")
            return None
        if length < 1:
            debug_log(f"get_short_option_length: ignoring non-positive value {length}")
            return None
        return length
