[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "castlequest"
version = "0.1.0"
description = "A small console text adventure: explore a castle, defeat its monsters and rescue the princess."
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "game", "interactive fiction", "castle", "console"]
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
    "Topic :: Games/Entertainment :: Multi-User Dungeons (MUD)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
castlequest = "castlequest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["castlequest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
