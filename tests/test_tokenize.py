import pytest

from wordstem import Porter2Stemmer, Tokenizer


@pytest.fixture
def tokenizer():
    return Tokenizer()


def test_words(tokenizer):
    assert tokenizer.words("Don't stop the girls' running!") == [
        "Don't",
        "stop",
        "the",
        "girls'",
        "running",
    ]


def test_words_skip_digits_and_punctuation(tokenizer):
    assert tokenizer.words("  42 -- 'quoted', hyphen-ated\n") == [
        "quoted'",
        "hyphen",
        "ated",
    ]


def test_tokenize(tokenizer):
    assert list(tokenizer.tokenize("Caresses and ponies")) == ["caress", "and", "poni"]


def test_first_words():
    assert Tokenizer.first_words("one two three", 2) == "one two"
    assert Tokenizer.first_words(" one\ttwo ", 5) == "one two"


def test_max_words():
    tokenizer = Tokenizer(max_words=2)

    assert tokenizer.words("cats dogs birds") == ["cats", "dogs"]
    assert list(tokenizer.tokenize("cats dogs birds")) == ["cat", "dog"]


def test_tokenize_group():
    tokens_num, groups = Tokenizer(stemmer=Porter2Stemmer()).tokenize_group(
        "running runs ran"
    )

    assert tokens_num == 3
    assert dict(groups) == {"run": [0, 1], "ran": [2]}


def test_tokenize_group_empty(tokenizer):
    tokens_num, groups = tokenizer.tokenize_group("")

    assert tokens_num == 0
    assert dict(groups) == {}
