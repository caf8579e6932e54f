[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gordle"
version = "0.1.0"
description = "A terminal word-guessing game: find the hidden word within a limited number of attempts."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "word", "puzzle", "terminal", "wordle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gordle = "gordle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gordle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
