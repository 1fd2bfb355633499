[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blastgrid"
version = "0.1.0"
description = "Building blocks for a grid-based bomb-laying arcade game: tile grid, collisions, moving entities, bombs, enemy AI, camera and input mapping."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "grid", "ai", "collision", "state-machine"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blastgrid"]

[tool.hatch.build.targets.sdist]
include = ["blastgrid", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
