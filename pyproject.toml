[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokata"
version = "0.1.0"
description = "Worked solutions to classic algorithm puzzles: arrays, strings, trees, linked lists, grids and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "dynamic programming", "puzzles", "kata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algokata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
