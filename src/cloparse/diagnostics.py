"""Hard-failure helpers for cloparse."""

import logging

from .exceptions import InternalError, IOStatusError


def assert_hard(condition: bool, message: str = "") -> None:
    """Raise InternalError when an internal invariant does not hold."""
    if not condition:
        raise InternalError(f"not {message}" if message else "internal check failed")


def check_io_status(
    ok: bool, message: str, hard: bool = True, error: OSError | None = None
) -> None:
    """
    Report a failed I/O operation.

    Args:
        ok: Result of the I/O operation; nothing happens when True
        message: What was being attempted
        hard: Whether the failure is fatal
        error: The OSError describing the failure, if one was caught

    Raises:
        IOStatusError: If the operation failed and ``hard`` is set
    """
    if ok:
        return

    reason = "unknown I/O error"
    if error is not None:
        reason = error.strerror or str(error)

    logging.error(f"{message}:   {reason}.")
    if hard:
        raise IOStatusError(message, reason) from error
