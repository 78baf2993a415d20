"""Whitespace tokenizing for cloparse."""

from .types import ArgsList


class Tokenizer:
    """Splits raw strings into whitespace-delimited words."""

    @staticmethod
    def split(text: str, words: ArgsList | None = None) -> ArgsList:
        """
        Append the words of ``text`` to ``words`` and return the list.

        Runs of whitespace act as one separator; leading and trailing
        whitespace never produce empty words.
        """
        if words is None:
            words = []
        words.extend(text.split())
        return words
