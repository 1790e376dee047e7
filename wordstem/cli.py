"""Command-line interface for wordstem."""

import argparse
import sys

from loguru import logger

from .config import load_config
from .errors import ConfigError
from .logger import setup_logger
from .stemmer import Porter2Stemmer
from .tokenize import Tokenizer


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordstem",
        description="Reduce English words to their Porter2 stems",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stem words given on the command line
  %(prog)s consisting caresses ponies

  # Stem every line of a file, at most 3 words per line
  %(prog)s --max-words 3 < words.txt

  # Show the word after every stage
  %(prog)s --trace relational

Example config.json:
{
  "max_words": 10,
  "cache_size": 4096,
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "words",
        nargs="*",
        help="Words to stem, read from stdin line by line when omitted",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=10,
        help="Stem at most this many words of every input line (default: 10)",
    )
    parser.add_argument(
        "--cache-size",
        type=int,
        default=1024,
        help="Number of memoized stems, 0 disables the cache (default: 1024)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the word after every stemming stage",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, args, parser)
    except ConfigError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug)
    logger.info(
        "Stemming with max_words={} cache_size={}", config.max_words, config.cache_size
    )

    stemmer = Porter2Stemmer(cache_size=config.cache_size)
    tokenizer = Tokenizer(stemmer=stemmer, max_words=config.max_words)
    lines = [" ".join(args.words)] if args.words else sys.stdin

    count = 0
    for line in lines:
        for word in tokenizer.words(line):
            if config.trace:
                print(word)
                for stage, value in stemmer.trace(word):
                    print(f"  {stage}\t{value}")
            else:
                print(f"{word}\t{stemmer.stem(word)}")
            count += 1

    logger.info("Stemmed {} words", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
