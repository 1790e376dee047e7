"""Configuration management for wordstem."""

import json
import os
from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from .errors import ConfigError


def _is_int(value) -> bool:
    # bool is an int subclass, JSON true must not pass as 1
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Config:
    """Configuration of the command line stemmer."""

    max_words: int = 10  # longest selection stemmed at once
    cache_size: int = 1024  # memoized stems, 0 disables the cache
    trace: bool = False
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        if not _is_int(self.max_words) or self.max_words < 1:
            raise ConfigError(f"max_words must be a positive integer, got {self.max_words!r}")
        if not _is_int(self.cache_size) or self.cache_size < 0:
            raise ConfigError(
                f"cache_size must be a non-negative integer, got {self.cache_size!r}"
            )


def load_config(
    json_path: str | None, cli_args: Namespace, parser: ArgumentParser
) -> Config:
    """Load JSON config, override with CLI args, return Config object.

    Raises:
        ConfigError: the JSON file can't be read or holds invalid values
    """

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        if cli_value != parser.get_default(key):
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = os.path.expanduser(json_path)
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not load config from {json_path}: {e}") from e

        if not isinstance(json_config, dict):
            raise ConfigError(f"Config in {json_path} must be a JSON object")

    return Config(
        max_words=get_value("max_words", Config.max_words),
        cache_size=get_value("cache_size", Config.cache_size),
        trace=cli_args.trace or json_config.get("trace", False),
        verbose=cli_args.verbose or json_config.get("verbose", False),
        debug=cli_args.debug or json_config.get("debug", False),
    )
