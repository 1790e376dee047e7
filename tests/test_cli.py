import io
import json

import pytest

from wordstem.cli import create_parser, main
from wordstem.config import Config, load_config
from wordstem.errors import ConfigError


def test_stems_arguments(capsys):
    assert main(["consisting", "Ponies"]) == 0

    assert capsys.readouterr().out == "consisting\tconsist\nPonies\tponi\n"


def test_stems_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("caresses\nherring, skis\n"))

    assert main([]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "caresses\tcaress",
        "herring\therring",
        "skis\tski",
    ]


def test_max_words(capsys):
    main(["--max-words", "1", "cats", "dogs"])

    assert capsys.readouterr().out == "cats\tcat\n"


def test_trace(capsys):
    main(["--trace", "herrings"])

    assert capsys.readouterr().out.splitlines() == [
        "herrings",
        "  normalize\therrings",
        "  1a\therring",
        "  restore\therring",
    ]


def test_json_config(capsys, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"max_words": 1, "cache_size": 0}))

    main(["-c", str(config), "cats", "dogs"])

    assert capsys.readouterr().out == "cats\tcat\n"


def test_invalid_config_exits(tmp_path):
    config = tmp_path / "config.json"
    config.write_text("{not json")

    with pytest.raises(SystemExit) as e:
        main(["-c", str(config), "cats"])

    assert e.value.code == 2


def test_invalid_max_words_exits():
    with pytest.raises(SystemExit) as e:
        main(["--max-words", "0", "cats"])

    assert e.value.code == 2


def test_load_config_priority(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"max_words": 3, "cache_size": 16, "verbose": True}))
    parser = create_parser()

    args = parser.parse_args(["--max-words", "5", "word"])
    loaded = load_config(str(config), args, parser)

    assert loaded == Config(max_words=5, cache_size=16, verbose=True)


def test_load_config_defaults():
    parser = create_parser()

    assert load_config(None, parser.parse_args([]), parser) == Config()


def test_load_config_rejects_non_object(tmp_path):
    config = tmp_path / "config.json"
    config.write_text("[1, 2]")
    parser = create_parser()

    with pytest.raises(ConfigError):
        load_config(str(config), parser.parse_args([]), parser)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_words": 0},
        {"max_words": "10"},
        {"max_words": True},
        {"cache_size": -1},
        {"cache_size": False},
    ],
)
def test_config_validation(kwargs):
    with pytest.raises(ConfigError):
        Config(**kwargs)


def test_boolean_max_words_in_json_exits(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"max_words": True}))

    with pytest.raises(SystemExit) as e:
        main(["-c", str(config), "cats"])

    assert e.value.code == 2
