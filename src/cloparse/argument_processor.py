"""Argument parsing sessions built on the option matcher."""

from typing import Any, Sequence

from .diagnostics import assert_hard
from .environment_helper import debug_log
from .exceptions import InvalidValueError, MissingOptionError, MissingValueError
from .option_matcher import (
    DEFAULT_SHORT_KEYWORD_LENGTH,
    Cursor,
    MatchOutcome,
    OptionMatcher,
)
from .types import ArgsList, OptionValues, SplitResult
from .value_binder import ValueSlot


class OptionSpec:
    """Declaration of one logical option and its alternative spellings."""

    def __init__(
        self,
        name: str,
        aliases: str,
        target: Any = None,
        value_optional: bool = False,
        required: bool = False,
        multiple: bool = False,
        default: Any = None,
    ):
        self.name = name
        self.aliases = aliases
        self.target = target
        self.value_optional = value_optional
        self.required = required
        self.multiple = multiple
        self.default = default

    @property
    def is_flag(self) -> bool:
        return self.target is None

    def new_slot(self) -> ValueSlot | None:
        """Create a fresh value slot, or None for a flag."""
        if self.is_flag:
            return None
        return ValueSlot.of(self.target)

    def initial_value(self) -> Any:
        if self.is_flag:
            return 0
        if self.multiple:
            return []
        return self.default

    def __repr__(self):
        return f"OptionSpec({self.name!r}, {self.aliases!r})"


class ParsedArgs:
    """Result of a parse session: option values plus positional arguments."""

    def __init__(self, values: OptionValues, positionals: ArgsList, seen: set[str]):
        self.values = values
        self.positionals = positionals
        self.seen = seen

    def __contains__(self, name):
        """Check whether an option was given on the command line."""
        return name in self.seen

    def __getitem__(self, name):
        return self.values[name]

    def get(self, name, default=None):
        return self.values.get(name, default)


class ArgumentProcessor:
    """Drives an OptionMatcher over a whole argument list."""

    def __init__(
        self,
        options: Sequence[OptionSpec],
        short_keyword_length: int = DEFAULT_SHORT_KEYWORD_LENGTH,
    ):
        self.options = list(options)
        self.short_keyword_length = short_keyword_length

    @staticmethod
    def split_at_separator(args: ArgsList) -> SplitResult:
        """Split arguments at the first '--'; the separator itself is dropped."""
        if "--" in args:
            idx = args.index("--")
            return args[:idx], args[idx + 1 :]
        return args, []

    def parse(self, args: ArgsList) -> ParsedArgs:
        """
        Match every token against the declared options in declaration order.

        Tokens no option claims become positionals, as do all tokens after
        '--'.

        Raises:
            MissingValueError: If an option needing a value is the last token
            InvalidValueError: If an option's value cannot be converted
            MissingOptionError: If a required option never appears
        """
        tokens, trailing = self.split_at_separator(args)
        values: OptionValues = {o.name: o.initial_value() for o in self.options}
        positionals: ArgsList = []
        seen: set[str] = set()

        cursor = Cursor()
        matcher = OptionMatcher(tokens, cursor, self.short_keyword_length)

        while cursor.index < len(tokens):
            start = cursor.index
            option = self._match_any(matcher, values)
            if option is None:
                positionals.append(tokens[start])
                cursor.advance()
                continue

            seen.add(option.name)
            # Flags and attached values leave the cursor on the option token
            if cursor.index == start:
                cursor.advance()

        assert_hard(cursor.index == len(tokens), "cursor at end of token list")

        for option in self.options:
            if option.required and option.name not in seen:
                raise MissingOptionError(option.aliases.split()[-1])

        return ParsedArgs(values, positionals + trailing, seen)

    def _match_any(
        self, matcher: OptionMatcher, values: OptionValues
    ) -> OptionSpec | None:
        """
        Try each option against the current token, recording the first match.

        An option that recognizes the token but cannot take its value only
        raises once no later option claims the token.
        """
        start = matcher.cursor.index
        failure = None
        for option in self.options:
            matcher.cursor.index = start
            slot = option.new_slot()
            if matcher.match(option.aliases, slot, option.value_optional):
                self._store(option, slot, values)
                return option
            if failure is None and matcher.last_outcome in (
                MatchOutcome.MISSING_VALUE,
                MatchOutcome.INVALID_VALUE,
            ):
                failure = (
                    matcher.last_outcome,
                    matcher.last_keyword,
                    matcher.last_candidate,
                    slot.binder.name,
                )

        matcher.cursor.index = start
        if failure is not None:
            self._raise_unbound(*failure)
        return None

    @staticmethod
    def _store(option: OptionSpec, slot: ValueSlot | None, values: OptionValues):
        if slot is None:
            values[option.name] += 1
        elif not slot.is_set:
            debug_log(f"parse: {option.name} given without a value")
        elif option.multiple:
            values[option.name].append(slot.value)
        else:
            values[option.name] = slot.value
        debug_log(f"parse: {option.name} = {values[option.name]!r}")

    @staticmethod
    def _raise_unbound(
        outcome: MatchOutcome, keyword: str, candidate: str | None, expected: str
    ) -> None:
        """Raise for an option that was recognized but could not take its value."""
        if outcome is MatchOutcome.MISSING_VALUE:
            raise MissingValueError(keyword)
        raise InvalidValueError(keyword, candidate, expected)
