"""Command-line entry point for Markov text generation."""

from __future__ import annotations

import argparse
import random
import sys

from markovtext.textgen import TextGenerator

DEFAULT_INPUT = "../../src/input.txt"
DEFAULT_OUTPUT = "../../result/gen.txt"
DEFAULT_PREFIX_LENGTH = 2
DEFAULT_MAX_WORDS = 1000


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markovtext",
        description="Generate text from a Markov chain built over an input text.",
    )
    parser.add_argument("-i", "--input", default=DEFAULT_INPUT, help="source text file")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="file to write")
    parser.add_argument(
        "-p", "--prefix-length", type=int, default=DEFAULT_PREFIX_LENGTH,
        help="number of words in a prefix",
    )
    parser.add_argument(
        "-n", "--max-words", type=int, default=DEFAULT_MAX_WORDS,
        help="maximum number of words to generate",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Build a table from the input file and write generated text; return an exit code."""
    args = _build_parser().parse_args(argv)
    generator = TextGenerator(random.Random(args.seed))
    try:
        generator.create_table(args.input, args.prefix_length)
        generator.generate_text(args.max_words, args.output)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())