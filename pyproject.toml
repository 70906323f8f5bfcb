[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rsnote"
version = "0.1.0"
description = "A simple command-line note-taking application"
requires-python = ">=3.10"
keywords = ["note", "note taking", "command line", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
    "tomli; python_version < '3.11'",
    "tomli-w",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rsnote = "rsnote.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rsnote"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
