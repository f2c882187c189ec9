[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "backrank"
version = "0.1.0"
description = "PageRank on directed graphs, with the Backspace treatment of dead-end pages"
requires-python = ">=3.10"
keywords = ["pagerank", "graph", "markov chain", "matrix market", "dead ends", "backspace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
backrank = "backrank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["backrank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
