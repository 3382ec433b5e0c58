# markovtext

Generate new text from a sample by following a word-level Markov chain.

The sample is split on whitespace into words. Every run of `prefix_length`
consecutive words becomes a prefix, and the word that follows it is recorded
as one of its possible suffixes. Generation starts from the first prefix of
the sample and repeatedly picks a random suffix of the current prefix, until
the requested number of words has been added or the chain reaches a prefix
with no known continuation.

## Installation

```
pip install .
```

## Command line

```
markovtext --help
```

The command reads a sample text, builds the table and writes the generated
text to a file.

| Option | Default | Meaning |
| --- | --- | --- |
| `-i`, `--input` | `../../src/input.txt` | sample text file |
| `-o`, `--output` | `../../result/gen.txt` | file to write |
| `-p`, `--prefix-length` | `2` | number of words in a prefix |
| `-n`, `--max-words` | `1000` | maximum number of words to add |
| `--seed` | none | seed for the random choices |

The defaults are paths relative to the current directory, so in practice you
will usually pass `--input` and `--output`:

```
markovtext -i sample.txt -o gen.txt -p 2 -n 200 --seed 1
```

On success it prints `Text generation completed. Result saved to <path>` and
exits with status 0. If the input cannot be read, the output cannot be
written, or the input is too short for the prefix length, it prints
`error: <message>` to standard error and exits with status 1. The output
directory is not created for you.

## Library

```python
import random

from markovtext.textgen import TextGenerator, read_words

words = read_words("input.txt")          # whitespace-separated words

generator = TextGenerator(random.Random(42))
generator.create_table("input.txt", 2)   # two-word prefixes
text = generator.generate(1000)          # up to 1000 words after the first prefix
generator.generate_text(1000, "gen.txt") # the same, written to a file
```

- `read_words(path)` returns the whitespace-separated words of a UTF-8 file.
- `TextGenerator(rng=None)` uses the given `random.Random`, or a fresh one.
  Passing your own seeded instance makes the output reproducible.
- `create_table(path, prefix_length)` fills `table` (a dict from word tuples
  to lists of following words, duplicates kept) and `first_prefix`. It raises
  `OSError` (such as `FileNotFoundError`) when the file cannot be opened, and
  `ValueError` when `prefix_length` is below 1 or the file holds fewer than
  `prefix_length + 1` words.
- `generate(max_count)` returns the first prefix followed by up to
  `max_count` generated words, joined by single spaces. It raises
  `ValueError` if no table has been built.
- `generate_text(max_count, path)` writes that text to `path` and prints a
  confirmation line.

## Running the tests

```
pip install .[test]
pytest
```