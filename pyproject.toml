[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wizardtd"
version = "0.1.0"
description = "Game rules for a grid-based wizard tower-defense: maps, path distances, waves, enemies, bullets, player and menu flow"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tower-defense", "bfs", "pathfinding", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wizardtd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
