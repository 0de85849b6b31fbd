[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numtally"
version = "0.1.0"
description = "Small interactive analyzers for integer lists, set operations on two lists, and text lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["statistics", "sets", "strings", "cli", "analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numtally-array = "numtally.array_analyzer:main"
numtally-multitude = "numtally.multitude:main"
numtally-string = "numtally.string_analyzer:main"

[tool.hatch.build.targets.wheel]
packages = ["numtally"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
