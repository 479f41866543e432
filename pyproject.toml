[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cluedo"
version = "0.1.0"
description = "A Cluedo game engine: board graph, cards, players and a threaded game loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["cluedo", "clue", "board game", "deduction", "game engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["cluedo"]

[tool.pytest.ini_options]
addopts = "-ra"
