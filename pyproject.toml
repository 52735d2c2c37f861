[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bicitree"
version = "0.1.0"
description = "Command-driven simulator of a bicycle-sharing network whose stations form a binary tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["bicycle", "simulation", "binary-tree", "stations"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bicitree = "bicitree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bicitree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
