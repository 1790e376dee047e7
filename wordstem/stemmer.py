import re
from functools import lru_cache
from typing import Optional

from .errors import InvalidWordError
from .rules import (
    APOSTROPHES,
    DOUBLES,
    INVARIANT_WORDS,
    PRE_STEM_EXCEPTIONS,
    R1_PREFIX_REGEX,
    STEP_1A_EXCEPTIONS,
    STEP_1B_E_ENDINGS,
    STEP_1B_EED_RULES,
    STEP_1B_ING_RULES,
    STEP_2_RULES,
    STEP_3_RULES,
    STEP_4_RULES,
    VOWELS,
    Y_MARKER,
    Region,
    RuleTable,
)

VOWEL_REGEX = re.compile(r"[aeiouy]")
REGION_REGEX = re.compile(r"[aeiouy][^aeiouy]")
Y_REGEX = re.compile(r"^y|(?<=[aeiou])y")
SHORT_SYLLABLE_REGEX = re.compile(r"[^aeiouy][aeiouy][^aeiouywxY]\Z")
SHORT_WORD_REGEX = re.compile(r"[aeiouy][^aeiouy]?")

STAGES = ("1a", "1b", "1c", "2", "3", "4", "5")


class Porter2Stemmer:
    """
    Porter2 stemmer based on rules described on official snowball website
    https://snowballstem.org/algorithms/english/stemmer.html

    Regions are recomputed from scratch by every step, so an instance keeps
    no state between calls and can be shared between threads.
    """

    def __init__(self, cache_size: int = 1024):
        self._cached_stem = lru_cache(maxsize=cache_size)(self._stem)

    def stem(self, word: str) -> str:
        """
        Stem the word if it has more than two characters,
        otherwise return it lower-cased.

        Raises:
            InvalidWordError: word is not a string
        """
        if not isinstance(word, str):
            raise InvalidWordError(f"Expected str, got {type(word).__name__}")

        return self._cached_stem(word)

    def trace(self, word: str) -> list[tuple[str, str]]:
        """
        Stem the word and return (stage, word) pairs describing
        the word after every stage that ran
        """
        if not isinstance(word, str):
            raise InvalidWordError(f"Expected str, got {type(word).__name__}")

        steps = []
        self._run(word, steps)
        return steps

    def cache_clear(self) -> None:
        self._cached_stem.cache_clear()

    def _stem(self, word: str) -> str:
        return self._run(word)

    def _run(self, word: str, steps: Optional[list] = None) -> str:
        def record(stage, value):
            if steps is not None:
                steps.append((stage, value))

        word = word.lower()
        if len(word) < 3:
            record("normalize", word)
            return word

        word = self.normalize(word)
        record("normalize", word)

        if (stem := self.lookup_exception(word)) is not None:
            record("exception", stem)
            return stem

        word = self.step_1a(word)
        record("1a", word)

        if not self.is_stage_1a_exception(word):
            for stage, step in zip(
                STAGES[1:],
                (
                    self.step_1b,
                    self.step_1c,
                    self.step_2,
                    self.step_3,
                    self.step_4,
                    self.step_5,
                ),
            ):
                word = step(word)
                record(stage, word)

        word = word.replace(Y_MARKER, "y")
        record("restore", word)

        return word

    def normalize(self, word: str) -> str:
        if not isinstance(word, str):
            raise InvalidWordError(f"Expected str, got {type(word).__name__}")

        word = word.lower()
        if len(word) < 3:
            return word

        word = Y_REGEX.sub(Y_MARKER, word)

        for apostrophe in APOSTROPHES:
            if word.endswith(apostrophe + "s"):
                word = word[:-2]
                break
        for apostrophe in APOSTROPHES:
            if word.endswith("s" + apostrophe):
                word = word[:-2]
                break
        if word.endswith(APOSTROPHES):
            word = word[:-1]

        return word

    def lookup_exception(self, word: str) -> Optional[str]:
        if word in INVARIANT_WORDS:
            return word

        return PRE_STEM_EXCEPTIONS.get(word)

    def is_stage_1a_exception(self, word: str) -> bool:
        return word in STEP_1A_EXCEPTIONS

    def mark_regions(self, word: str) -> tuple[int, int]:
        """
        Return start offsets of R1 and R2, len(word) stands for an empty region
        """
        if prefix := R1_PREFIX_REGEX.match(word):
            r1 = prefix.end()
        else:
            r1 = self._region_start(word, 0)

        return r1, self._region_start(word, r1)

    def _region_start(self, word: str, start: int) -> int:
        if match := REGION_REGEX.search(word, start):
            return match.end()

        return len(word)

    def is_short_syllable(self, word: str) -> bool:
        return bool(
            SHORT_SYLLABLE_REGEX.search(word) or SHORT_WORD_REGEX.fullmatch(word)
        )

    def has_doubled_final_consonant(self, word: str) -> bool:
        return word.endswith(DOUBLES)

    def apply_rules(self, word: str, rules: RuleTable) -> str:
        """
        Apply the longest matching rule of the table, a rule whose suffix
        lies outside its region leaves the word unchanged
        """
        rule = rules.match(word)
        if rule is None:
            return word

        start = len(word) - len(rule.suffix)
        r1, r2 = self.mark_regions(word)
        region_start = {Region.WORD: 0, Region.R1: r1, Region.R2: r2}[rule.region]

        if start < region_start:
            return word

        if rule.preceded_by and not (start and word[start - 1] in rule.preceded_by):
            return word

        return word[:start] + rule.replacement

    def step_1a(self, word: str) -> str:
        if len(word) > 4 and word.endswith("sses"):
            return word[:-2]

        if word.endswith(("ied", "ies")):
            if len(word) > 5:
                return word[:-3] + "i"
            elif len(word) > 3:
                return word[:-3] + "ie"

        if word.endswith(("us", "ss")):
            return word

        # the vowel must not be the letter right before the "s"
        if word.endswith("s") and VOWEL_REGEX.search(word[:-2]):
            return word[:-1]

        return word

    def step_1b(self, word: str) -> str:
        if STEP_1B_EED_RULES.match(word):
            return self.apply_rules(word, STEP_1B_EED_RULES)

        rule = STEP_1B_ING_RULES.match(word)
        if rule is None:
            return word

        stripped = word[: -len(rule.suffix)]
        if not VOWEL_REGEX.search(stripped):
            return word

        if stripped.endswith(STEP_1B_E_ENDINGS):
            return stripped + "e"
        elif self.has_doubled_final_consonant(stripped):
            return stripped[:-1]
        elif self.is_short_syllable(stripped) and self.mark_regions(stripped)[0] == len(
            stripped
        ):
            return stripped + "e"

        return stripped

    def step_1c(self, word: str) -> str:
        if len(word) > 2 and word[-1] in "y" + Y_MARKER and word[-2] not in VOWELS:
            return word[:-1] + "i"

        return word

    def step_2(self, word: str) -> str:
        return self.apply_rules(word, STEP_2_RULES)

    def step_3(self, word: str) -> str:
        return self.apply_rules(word, STEP_3_RULES)

    def step_4(self, word: str) -> str:
        return self.apply_rules(word, STEP_4_RULES)

    def step_5(self, word: str) -> str:
        r1, r2 = self.mark_regions(word)
        last = len(word) - 1

        if word.endswith("e"):
            if last >= r2 or (last >= r1 and not self.is_short_syllable(word[:-1])):
                return word[:-1]

        elif word.endswith("ll") and last >= r2:
            return word[:-1]

        return word


# Global instance
_stemmer = Porter2Stemmer()


def stem(word: str) -> str:
    """Stem a single word, e.g. "consisting" -> "consist" """
    return _stemmer.stem(word)


def normalize(word: str) -> str:
    return _stemmer.normalize(word)


def lookup_exception(word: str) -> Optional[str]:
    return _stemmer.lookup_exception(word)


def is_stage_1a_exception(word: str) -> bool:
    return _stemmer.is_stage_1a_exception(word)


def mark_regions(word: str) -> tuple[int, int]:
    return _stemmer.mark_regions(word)


def is_short_syllable(word: str) -> bool:
    return _stemmer.is_short_syllable(word)


def has_doubled_final_consonant(word: str) -> bool:
    return _stemmer.has_doubled_final_consonant(word)
