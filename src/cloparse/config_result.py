"""Config result container for cloparse."""

from .option_matcher import DEFAULT_SHORT_KEYWORD_LENGTH
from .tokenizer import Tokenizer
from .types import ArgsList, ConfigData


class ConfigResult:
    """Class to hold the settings read from a config file."""

    def __init__(self, settings: ConfigData | None = None):
        self.settings = settings if settings is not None else {}

    @property
    def short_option_length(self) -> int:
        """Longest keyword that may carry an attached value."""
        raw = self.settings.get("short_option_length")
        if raw is None:
            return DEFAULT_SHORT_KEYWORD_LENGTH
        return int(raw)

    @property
    def default_args(self) -> ArgsList:
        """Arguments prepended to every command line."""
        return Tokenizer.split(self.settings.get("default_args", ""))

    @property
    def require(self) -> str | None:
        return self.settings.get("require")

    def __contains__(self, key):
        """Allow checking if a setting exists using 'in' operator."""
        return key in self.settings

    def __getitem__(self, key):
        return self.settings[key]

    def __eq__(self, other):
        if isinstance(other, dict):
            return self.settings == other
        if isinstance(other, ConfigResult):
            return self.settings == other.settings
        return NotImplemented

    def get(self, key, default=None):
        return self.settings.get(key, default)
