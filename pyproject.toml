[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "queenboard"
version = "0.1.0"
description = "Enumerate and randomly generate 8x8 queen boards where no two queens share a row, a column or a touching diagonal"
requires-python = ">=3.10"
dependencies = []
keywords = ["queens", "puzzle", "board", "backtracking", "bitboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
queenboard = "queenboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["queenboard"]

[tool.pytest.ini_options]
addopts = "-ra"
