[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "chmnav"
version = "8.4"
description = "Navigation models for compiled help and e-book viewers: contents, index, bookmarks, search, toolbars and tabbed browser windows"
requires-python = ">=3.10"
dependencies = []
keywords = ["chm", "epub", "help", "table of contents", "index", "bookmarks", "viewer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["chmnav"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
