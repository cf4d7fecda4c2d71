[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shashki"
version = "0.1.0"
description = "Draughts (shashki) against a neural-network bot trained by a genetic algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = ["checkers", "shashki", "draughts", "genetic-algorithm", "neural-network", "minimax"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shashki = "shashki.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shashki"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
