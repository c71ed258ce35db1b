[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linepad"
version = "0.1.0"
description = "A small line-oriented console text editor with tasks, contacts, undo/redo and Caesar encryption"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "console", "undo", "caesar", "tasks", "contacts"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linepad = "linepad.cli:main"
linepad-simple = "linepad.simple_editor:main"
linepad-caesar = "linepad.caesar:main"

[tool.hatch.build.targets.wheel]
packages = ["linepad"]

[tool.pytest.ini_options]
addopts = "-ra"
