class WordstemError(Exception):
    """Base class of errors raised by wordstem."""


class InvalidWordError(WordstemError, TypeError):
    """Errors raised by stem and normalize for non-string input."""


class ConfigError(WordstemError, ValueError):
    """Errors raised by load_config and Config for invalid settings."""
