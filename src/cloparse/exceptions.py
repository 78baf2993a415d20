"""Custom exceptions for cloparse."""


class CloParseError(Exception):
    """Base exception for cloparse errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AliasSpecError(CloParseError):
    """Raised when an alias spec contains list separators."""

    def __init__(self, alias_spec: str):
        super().__init__(
            f"Invalid alias spec '{alias_spec}': aliases must be separated by spaces"
        )
        self.alias_spec = alias_spec


class MissingOptionError(CloParseError):
    """Raised when a mandatory option is absent after a full parse pass."""

    def __init__(self, option: str):
        super().__init__(f"Required option '{option}' not given")
        self.option = option


class MissingValueError(CloParseError):
    """Raised when a recognized option has no token left to serve as its value."""

    def __init__(self, option: str):
        super().__init__(f"Option '{option}' requires a value")
        self.option = option


class InvalidValueError(CloParseError):
    """Raised when the value given for an option cannot be converted."""

    def __init__(
        self, option: str, value: str | None = None, expected: str | None = None
    ):
        message = f"Invalid value for option '{option}'"
        if value is not None:
            message += f": '{value}'"
        if expected:
            message += f" (expected {expected})"
        super().__init__(message)
        self.option = option
        self.value = value
        self.expected = expected


class InvalidConfigError(CloParseError):
    """Raised when config file has invalid format or content."""

    def __init__(
        self,
        path: str,
        line_num: int | None = None,
        message: str = "Invalid config format",
    ):
        full_message = f"Invalid config in {path}"
        if line_num:
            full_message += f" at line {line_num}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.line_num = line_num


class IOStatusError(CloParseError):
    """Raised by check_io_status when a failed I/O operation is fatal."""

    def __init__(self, message: str, reason: str):
        super().__init__(f"{message}: {reason}")
        self.reason = reason


class InternalError(CloParseError):
    """Raised when an internal invariant does not hold."""
