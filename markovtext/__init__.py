"""Word-level Markov chain text generation: a generator class and a command-line entry point."""

__version__ = "0.1.0"
__all__ = ["__version__"]