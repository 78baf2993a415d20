"""Per-token command-line option matching for cloparse."""

from enum import Enum

from .environment_helper import debug_log
from .exceptions import AliasSpecError
from .tokenizer import Tokenizer
from .types import AliasList, ArgsList
from .value_binder import ValueSlot

DEFAULT_SHORT_KEYWORD_LENGTH = 2
"""Keywords up to this length may carry an attached value (e.g. -Ggecode)."""


class MatchOutcome(Enum):
    """What the most recent match call found."""

    NO_MATCH = "no_match"
    FLAG = "flag"
    VALUE = "value"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"


class Cursor:
    """Read position into a token list, shared across match calls."""

    def __init__(self, index: int = 0):
        self.index = index

    def advance(self, count: int = 1) -> None:
        self.index += count

    def __repr__(self):
        return f"Cursor({self.index})"


class OptionMatcher:
    """
    Matches the token under a shared cursor against option alias specs.

    The matcher only indexes ``tokens``; it never changes them. Matching
    failures are reported through the boolean result and ``last_outcome``,
    never raised.
    """

    def __init__(
        self,
        tokens: ArgsList,
        cursor: Cursor,
        short_keyword_length: int = DEFAULT_SHORT_KEYWORD_LENGTH,
    ):
        self.tokens = tokens
        self.cursor = cursor
        self.short_keyword_length = short_keyword_length
        self.last_outcome = MatchOutcome.NO_MATCH
        self.last_keyword: str | None = None
        self.last_candidate: str | None = None

    @staticmethod
    def split_aliases(alias_spec: str) -> AliasList:
        """Split a space-separated alias spec into its keywords."""
        if "," in alias_spec or ";" in alias_spec:
            raise AliasSpecError(alias_spec)
        return Tokenizer.split(alias_spec)

    def get(
        self,
        alias_spec: str,
        slot: ValueSlot | None = None,
        value_optional: bool = False,
    ) -> bool:
        """Alias of match()."""
        return self.match(alias_spec, slot, value_optional)

    def match(
        self,
        alias_spec: str,
        slot: ValueSlot | None = None,
        value_optional: bool = False,
    ) -> bool:
        """
        Try to match the current token against any keyword of ``alias_spec``.

        Args:
            alias_spec: Space-separated alternative spellings (e.g. "-v --verbose")
            slot: Receives the option value; None means the option is a flag
            value_optional: Result to report when the value is missing or invalid

        Returns:
            True if the option matched (and its value was bound, if a slot was
            given). A flag or attached value leaves the cursor in place; a
            separate value token moves it past that token.
        """
        keywords = self.split_aliases(alias_spec)
        self._record(MatchOutcome.NO_MATCH, None)

        start = self.cursor.index
        if start >= len(self.tokens):
            return False

        arg = self.tokens[start]
        for keyword in keywords:
            if not self._keyword_applies(keyword, arg, slot is not None):
                continue

            combined = len(keyword) < len(arg)
            if combined:
                if slot is None:
                    continue
                candidate = arg[len(keyword) :]
            else:
                if slot is None:
                    self._record(MatchOutcome.FLAG, keyword)
                    return True
                if start + 1 >= len(self.tokens):
                    self._record(MatchOutcome.MISSING_VALUE, keyword)
                    return value_optional
                candidate = self.tokens[start + 1]
                self.cursor.index = start + 2

            if slot.bind(candidate):
                self._record(MatchOutcome.VALUE, keyword, candidate)
                return True

            # Leave the rejected value token for the next match attempt
            if not combined:
                self.cursor.index = start + 1
            self._record(MatchOutcome.INVALID_VALUE, keyword, candidate)
            return value_optional

        return False

    def _keyword_applies(self, keyword: str, arg: str, has_slot: bool) -> bool:
        """Check the literal-prefix rule, requiring equality unless short with a slot."""
        if not arg.startswith(keyword):
            return False
        if has_slot and len(keyword) <= self.short_keyword_length:
            return True
        return arg == keyword

    def _record(
        self, outcome: MatchOutcome, keyword: str | None, candidate: str | None = None
    ) -> None:
        self.last_outcome = outcome
        self.last_keyword = keyword
        self.last_candidate = candidate
        if outcome is not MatchOutcome.NO_MATCH:
            debug_log(
                f"match: {keyword} at {self.cursor.index} -> {outcome.value}"
            )
