[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinflip"
version = "1.0.0"
description = "A terminal coin-flipping puzzle: turn every coin gold side up in twenty levels."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "coins", "lights-out", "terminal"]
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
coinflip = "coinflip.app:main"

[tool.hatch.build.targets.wheel]
packages = ["coinflip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
