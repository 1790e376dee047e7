"""
Rule and exception tables of the Porter2 (Snowball English) stemmer
https://snowballstem.org/algorithms/english/stemmer.html

Every table is built once at import time and never mutated afterwards.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Iterable, NamedTuple, Optional


class Region(Enum):
    """Part of the word a suffix has to lie in for its rule to fire."""

    WORD = "word"
    R1 = "r1"
    R2 = "r2"


class SuffixRule(NamedTuple):
    suffix: str
    replacement: str = ""
    region: Region = Region.R1
    # when set, the letter right before the suffix must be one of these
    preceded_by: str = ""


class RuleTable:
    """
    Ordered set of suffix rules of one stage.

    Suffixes are matched longest first and only the longest matching rule
    is returned, shorter alternatives are never considered.
    """

    def __init__(self, rules: Iterable[SuffixRule]):
        self._rules = MappingProxyType({rule.suffix: rule for rule in rules})
        suffixes = sorted(self._rules, key=len, reverse=True)
        self._regex = re.compile(r"(%s)\Z" % "|".join(map(re.escape, suffixes)))

    def __iter__(self):
        return iter(self._rules.values())

    def __len__(self):
        return len(self._rules)

    def match(self, word: str) -> Optional[SuffixRule]:
        if match := self._regex.search(word):
            return self._rules[match.group(1)]

        return None


VOWELS = "aeiouy"
DOUBLES = ("bb", "dd", "ff", "gg", "mm", "nn", "pp", "rr", "tt")
LI_ENDINGS = "cdeghkmnrt"

# stands for a consonant "y", never produced by lower-cased input
Y_MARKER = "Y"

APOSTROPHES = ("'", "’")

R1_PREFIX_REGEX = re.compile(r"^(gener|commun|arsen)")

PRE_STEM_EXCEPTIONS = MappingProxyType(
    {
        "skis": "ski",
        "skies": "sky",
        "dying": "die",
        "lying": "lie",
        "tying": "tie",
        "idly": "idl",
        "gently": "gentl",
        "ugly": "ugli",
        "early": "earli",
        "only": "onli",
        "singly": "singl",
    }
)

INVARIANT_WORDS = frozenset(("sky", "news", "atlas", "cosmos", "bias", "andes"))

STEP_1A_EXCEPTIONS = frozenset(
    (
        "inning",
        "outing",
        "canning",
        "herring",
        "proceed",
        "exceed",
        "succeed",
        "earring",
    )
)

STEP_1B_EED_RULES = RuleTable(
    (
        SuffixRule("eedly", "ee"),
        SuffixRule("eed", "ee"),
    )
)

STEP_1B_ING_RULES = RuleTable(
    SuffixRule(suffix, region=Region.WORD) for suffix in ("ingly", "edly", "ing", "ed")
)

STEP_1B_E_ENDINGS = ("at", "bl", "iz")

STEP_2_RULES = RuleTable(
    (
        SuffixRule("ization", "ize"),
        SuffixRule("ational", "ate"),
        SuffixRule("fulness", "ful"),
        SuffixRule("ousness", "ous"),
        SuffixRule("iveness", "ive"),
        SuffixRule("tional", "tion"),
        SuffixRule("biliti", "ble"),
        SuffixRule("lessli", "less"),
        SuffixRule("iviti", "ive"),
        SuffixRule("ousli", "ous"),
        SuffixRule("ation", "ate"),
        SuffixRule("entli", "ent"),
        SuffixRule("alism", "al"),
        SuffixRule("aliti", "al"),
        SuffixRule("fulli", "ful"),
        SuffixRule("alli", "al"),
        SuffixRule("ator", "ate"),
        SuffixRule("izer", "ize"),
        SuffixRule("enci", "ence"),
        SuffixRule("anci", "ance"),
        SuffixRule("abli", "able"),
        SuffixRule("bli", "ble"),
        SuffixRule("ogi", "og", preceded_by="l"),
        SuffixRule("li", "", preceded_by=LI_ENDINGS),
    )
)

STEP_3_RULES = RuleTable(
    (
        SuffixRule("ational", "ate"),
        SuffixRule("tional", "tion"),
        SuffixRule("alize", "al"),
        SuffixRule("icate", "ic"),
        SuffixRule("iciti", "ic"),
        SuffixRule("ative", "", region=Region.R2),
        SuffixRule("ical", "ic"),
        SuffixRule("ness", ""),
        SuffixRule("ful", ""),
    )
)

STEP_4_RULES = RuleTable(
    (
        *(
            SuffixRule(suffix, region=Region.R2)
            for suffix in (
                "ement",
                "ance",
                "ence",
                "able",
                "ible",
                "ment",
                "ant",
                "ent",
                "ism",
                "ate",
                "iti",
                "ous",
                "ive",
                "ize",
                "al",
                "er",
                "ic",
            )
        ),
        SuffixRule("ion", region=Region.R2, preceded_by="st"),
    )
)
