[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amazons"
version = "1.0.0"
description = "The Game of the Amazons on an 8x8 board, with a text interface, a greedy AI, JSON saves and a driver for external Botzone-protocol bots"
requires-python = ">=3.10"
dependencies = []
keywords = ["amazons", "game", "board game", "botzone", "ai"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
amazons = "amazons.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["amazons"]

[tool.pytest.ini_options]
addopts = "-ra"
