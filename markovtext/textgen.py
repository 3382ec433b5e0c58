"""Markov-chain text generation from word prefixes."""

from __future__ import annotations

import random
from collections.abc import Sequence
from pathlib import Path

Prefix = tuple[str, ...]
StateTable = dict[Prefix, list[str]]


def read_words(path: str | Path) -> list[str]:
    """Return the whitespace-separated words of a text file.

    Raises OSError (such as FileNotFoundError) when the file cannot be opened.
    """
    with open(path, encoding="utf-8") as handle:
        return handle.read().split()


class TextGenerator:
    """Builds a prefix-to-suffix table from a text and generates new text."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.prefix_length = 0
        self.table: StateTable = {}
        self.first_prefix: Prefix = ()

    def create_table(self, path: str | Path, prefix_length: int) -> None:
        """Fill the state table from the words of the file at *path*."""
        if prefix_length < 1:
            raise ValueError("Prefix length must be at least 1")
        words = read_words(path)
        if len(words) < prefix_length + 1:
            raise ValueError("Input text is too short for the given prefix size")

        self.prefix_length = prefix_length
        self.first_prefix = tuple(words[:prefix_length])
        table: StateTable = {}
        for start in range(len(words) - prefix_length):
            key = tuple(words[start:start + prefix_length])
            table.setdefault(key, []).append(words[start + prefix_length])
        self.table = table

    def _leading_words(self) -> list[str]:
        if not self.first_prefix:
            raise ValueError("No starting prefix; build the table first")
        return list(self.first_prefix[:max(self.prefix_length, 1)])

    def generate(self, max_count: int) -> str:
        """Generate text starting from the first prefix, adding up to *max_count* words.

        Generation stops early when the current prefix has no suffixes.
        """
        output = self._leading_words()
        current: Sequence[str] = self.first_prefix
        for _ in range(max_count):
            suffixes = self.table.get(tuple(current))
            if not suffixes:
                break
            next_word = self.rng.choice(suffixes)
            output.append(next_word)
            current = (*current[1:], next_word)
        return " ".join(output)

    def generate_text(self, max_count: int, path: str | Path) -> None:
        """Generate text and write it to the file at *path*."""
        text = self.generate(max_count)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
        print(f"Text generation completed. Result saved to {path}")