[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xenodon"
version = "0.1.0"
description = "Core utilities of a volume renderer: a character-level parser, command-line handling, logging and vector/quaternion math"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "volume-rendering",
    "parser",
    "argument-parsing",
    "logging",
    "vector",
    "quaternion",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xenodon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
