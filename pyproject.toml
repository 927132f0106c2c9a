[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfdemo"
version = "0.1.0"
description = "Building blocks for reading and writing Team Fortress 2 demo files"
requires-python = ">=3.10"
dependencies = []
keywords = ["tf2", "demo", "source-engine", "bitstream", "lzss", "game-events"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tfdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
