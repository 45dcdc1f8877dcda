[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonval"
version = "2.14.0"
description = "A JSON value model with UTF-8 checking, locale-independent number formatting, structural equality, copying and merging"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "values", "utf-8", "deep-copy", "merge"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["jsonval"]

[tool.hatch.build.targets.sdist]
include = ["jsonval", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
