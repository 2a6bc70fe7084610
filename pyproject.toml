[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexmatch"
version = "0.1.0"
description = "Headless game model for a hexagonal match-three puzzle: board layouts, pieces, overlay pages, animation and a small scene framework"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game", "puzzle", "match-three", "hexagonal", "animation", "scene-graph"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hexmatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
