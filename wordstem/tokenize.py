import re
from collections import defaultdict
from typing import Generator, ItemsView, Optional

from loguru import logger

from .stemmer import Porter2Stemmer


class Tokenizer:
    """
    Split text into single words and feed them to the stemmer,
    the stemmer itself never sees whitespace or punctuation
    """

    # letters with inner apostrophes ("don't") and a trailing one ("girls'")
    WORD_REGEX = re.compile(r"[A-Za-z]+(?:['’][A-Za-z]+)*['’]?")

    def __init__(
        self, stemmer: Optional[Porter2Stemmer] = None, max_words: Optional[int] = None
    ):
        self._stemmer = stemmer or Porter2Stemmer()
        self._max_words = max_words

    @staticmethod
    def first_words(text: str, max_words: int) -> str:
        """Keep at most max_words whitespace separated words of a selection"""
        words = text.split()
        if len(words) > max_words:
            logger.debug(
                "Selection of {} words truncated to {}", len(words), max_words
            )

        return " ".join(words[:max_words])

    def words(self, text: str) -> list[str]:
        if self._max_words is not None:
            text = self.first_words(text, self._max_words)

        return self.__class__.WORD_REGEX.findall(text)

    def tokenize(self, text: str) -> Generator[str, None, None]:
        for token in self.words(text):
            yield self._stemmer.stem(token)

    def tokenize_group(self, text: str) -> tuple[int, ItemsView[str, list[int]]]:
        tokens = defaultdict(list)

        i = -1
        for i, token in enumerate(self.tokenize(text)):
            tokens[token].append(i)

        return i + 1, tokens.items()
