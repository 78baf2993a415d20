"""Three-component semantic version for cloparse."""

import re
from functools import total_ordering

from .types import VersionFields

_FIELD = re.compile(r"\s*(\d+)")


@total_ordering
class SemanticVersion:
    """
    A major.minor.patch version with field-wise ordering.

    Text is parsed leniently: up to three dot-separated leading integers are
    read and parsing stops at the first field that is not one, leaving the
    remaining fields at 0. A bare leading or trailing dot counts as 0, so
    ".5" is 0.5.0 and "2." is 2.0.0. Pre-release and build metadata after
    the patch number are ignored.
    """

    def __init__(self, major: "int | str" = 0, minor: int = 0, patch: int = 0):
        if isinstance(major, str):
            major, minor, patch = self.parse_fields(major)
        self.major = major
        self.minor = minor
        self.patch = patch

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        return cls(*cls.parse_fields(text))

    @staticmethod
    def parse_fields(text: str) -> VersionFields:
        """Read (major, minor, patch) from text without ever failing."""
        if text.startswith("."):
            text = "0" + text
        if text.endswith("."):
            text += "0"

        fields = [0, 0, 0]
        pos = 0
        for i in range(3):
            if i > 0:
                if not text.startswith(".", pos):
                    break
                pos += 1
            m = _FIELD.match(text, pos)
            if not m:
                break
            fields[i] = int(m.group(1))
            pos = m.end()
        return fields[0], fields[1], fields[2]

    def as_tuple(self) -> VersionFields:
        return self.major, self.minor, self.patch

    def __eq__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other):
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.patch}"

    def __repr__(self):
        return f"SemanticVersion({self.major}, {self.minor}, {self.patch})"
