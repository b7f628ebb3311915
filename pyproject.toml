[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcsansano"
version = "0.1.0"
description = "A small turn-based kitchen game played on a grid in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "kitchen", "terminal", "turn-based", "grid"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mcsansano = "mcsansano.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mcsansano"]

[tool.pytest.ini_options]
addopts = "-ra"
