[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "konosubash"
version = "0.1.0"
description = "Building blocks for a small POSIX-style shell: an ordered environment, syntax tree nodes, and text, list, line-reading and printf helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "environment", "printf", "line-reader", "linked-list", "strings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["konosubash"]

[tool.hatch.build.targets.sdist]
include = ["konosubash", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
