"""Typed value binding for matched option values."""

from typing import Any, Callable

from .environment_helper import TRUTHY_VALUES

FALSY_VALUES = ("0", "false", "no", "off")


class ValueBinder:
    """Base class for converting captured option text into a typed value."""

    name = "value"

    def parse(self, text: str) -> Any:
        """Convert text, raising ValueError when it is not a valid value."""
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class TextBinder(ValueBinder):
    """Copies the captured text verbatim."""

    name = "text"

    def parse(self, text: str) -> str:
        return text


class IntegerBinder(ValueBinder):
    name = "integer"

    def parse(self, text: str) -> int:
        return int(text.strip())


class FloatBinder(ValueBinder):
    name = "number"

    def parse(self, text: str) -> float:
        return float(text.strip())


class BooleanBinder(ValueBinder):
    """Accepts 1/0, true/false, yes/no and on/off in any case."""

    name = "boolean"

    def parse(self, text: str) -> bool:
        lowered = text.strip().lower()
        if lowered in TRUTHY_VALUES:
            return True
        if lowered in FALSY_VALUES:
            return False
        raise ValueError(f"not a boolean: '{text}'")


class ParseBinder(ValueBinder):
    """Delegates to an arbitrary parse-from-text callable."""

    def __init__(self, parser: Callable[[str], Any]):
        self.parser = parser
        self.name = getattr(parser, "__name__", "value")

    def parse(self, text: str) -> Any:
        try:
            return self.parser(text)
        except (TypeError, ArithmeticError) as e:
            # e.g. decimal.InvalidOperation
            raise ValueError(str(e) or type(e).__name__) from e

    def __repr__(self):
        return f"ParseBinder({self.name})"


_BUILTIN_BINDERS = {
    str: TextBinder,
    int: IntegerBinder,
    float: FloatBinder,
    bool: BooleanBinder,
}


def binder_for(target: Any) -> ValueBinder:
    """
    Select the binder for a declared slot type.

    ``target`` may be one of ``str``, ``int``, ``float`` or ``bool``, an
    existing ValueBinder, or any callable that parses text.
    """
    if isinstance(target, ValueBinder):
        return target
    if target in _BUILTIN_BINDERS:
        return _BUILTIN_BINDERS[target]()
    if callable(target):
        return ParseBinder(target)
    raise TypeError(f"Cannot bind option values to {target!r}")


class ValueSlot:
    """Out-parameter receiving the value bound by a successful match."""

    def __init__(self, binder: ValueBinder):
        self.binder = binder
        self.value: Any = None
        self.is_set = False

    @classmethod
    def of(cls, target: Any) -> "ValueSlot":
        """Create an empty slot for the given target type."""
        return cls(binder_for(target))

    def bind(self, text: str) -> bool:
        """Store the converted text; leave the slot untouched on failure."""
        try:
            value = self.binder.parse(text)
        except ValueError:
            return False
        self.value = value
        self.is_set = True
        return True

    def clear(self) -> None:
        self.value = None
        self.is_set = False

    def __repr__(self):
        return f"ValueSlot({self.binder!r}, value={self.value!r}, is_set={self.is_set})"
