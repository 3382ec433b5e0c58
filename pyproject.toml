[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "markovtext"
version = "0.1.0"
description = "Generate text from a word-level Markov chain built over a sample text"
requires-python = ">=3.10"
dependencies = []
keywords = ["markov", "markov-chain", "text-generation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
markovtext = "markovtext.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["markovtext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
