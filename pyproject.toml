[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valorquest"
version = "1.0.0"
description = "A turn-based text role-playing game with heroes, areas, enemies, items and save files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "turn-based", "terminal"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
valorquest = "valorquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["valorquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
