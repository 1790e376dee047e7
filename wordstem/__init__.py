from .errors import ConfigError, InvalidWordError, WordstemError
from .stemmer import Porter2Stemmer, stem
from .tokenize import Tokenizer

__all__ = [
    "ConfigError",
    "InvalidWordError",
    "Porter2Stemmer",
    "Tokenizer",
    "WordstemError",
    "stem",
]
