[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marktree"
version = "0.1.0"
description = "A mutable Markdown syntax tree with GFM autolink detection and inline scanning helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "commonmark", "gfm", "ast", "autolink", "syntax-tree"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marktree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
