"""Comma-join formatting for cloparse."""

from typing import Any


class JoinFormatter:
    """Formats non-zero values, adding ", " before every one after the first."""

    def __init__(self):
        self._had_one = False
        self._parts: list[str] = []

    def __call__(self, value: Any, descr: str | None = None) -> str:
        """
        Format one value and append it to the accumulated text.

        Falsy values produce an empty fragment and do not count as output.
        """
        if not value:
            return ""

        fragment = ", " if self._had_one else ""
        self._had_one = True
        fragment += str(value)
        if descr:
            fragment += descr
        self._parts.append(fragment)
        return fragment

    @property
    def text(self) -> str:
        """Everything produced since construction or the last reset."""
        return "".join(self._parts)

    def reset(self) -> None:
        self._had_one = False
        self._parts.clear()

    def __bool__(self):
        return self._had_one

    def __str__(self):
        return self.text
