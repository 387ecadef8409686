[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "histcross"
version = "1.0.0"
description = "A history crossword puzzle game with a Tk interface and JSON level files"
requires-python = ">=3.10"
dependencies = []
keywords = ["crossword", "puzzle", "history", "game", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
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
histcross = "histcross.app:main"

[tool.hatch.build.targets.wheel]
packages = ["histcross"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
