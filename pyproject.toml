[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wimm"
version = "0.1.0"
description = "A small command-line task tracker that records how much time you spend on each task"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["tasks", "time-tracking", "todo", "cli", "productivity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wimm = "wimm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wimm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
