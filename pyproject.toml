[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sogame"
version = "0.1.0"
description = "A small tile-based puzzle game: collect every key, then reach the stairs."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "tiles", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = [
    "pytest",
]

[project.scripts]
sogame = "sogame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sogame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
