[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buscaminas"
version = "1.0.0"
description = "Terminal minesweeper with saved game lists, flags and undo"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "buscaminas", "game", "terminal", "puzzle"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
buscaminas = "buscaminas.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["buscaminas"]

[tool.pytest.ini_options]
addopts = "-ra"
