[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuiarea"
version = "0.7.0"
description = "Editing model for a multi-line terminal text area: keys, cursor moves, scrolling, undo history and line highlighting."
requires-python = ">=3.10"
dependencies = ["wcwidth"]
keywords = ["tui", "textarea", "editor", "input", "terminal", "undo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Topic :: Text Processing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuiarea"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
