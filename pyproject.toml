[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fifteen"
version = "0.1.0"
description = "The 15 sliding-tile puzzle in the terminal, with a best-first automatic solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["15-puzzle", "sliding puzzle", "game", "solver", "heuristic search"]
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
fifteen = "fifteen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fifteen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
