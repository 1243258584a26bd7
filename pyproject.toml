[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "spaceship"
version = "0.1.0"
description = "Solvers for a series of spaceship-themed programming puzzles, built around an Intcode computer"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "intcode", "pathfinding", "simulation"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spaceship = "spaceship.cli:main"

[tool.setuptools.packages.find]
include = ["spaceship*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
