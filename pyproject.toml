[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bourneshkit"
version = "0.1.0"
description = "Building blocks of a classic Bourne shell: pattern matching, file name generation, getopt, echo, character classes, command hashing and command-tree printing"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "bourne", "glob", "getopt", "echo", "hash", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bourneshkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
