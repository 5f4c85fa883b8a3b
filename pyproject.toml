[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algostructs"
version = "0.1.0"
description = "Classic algorithms and data structures: searching, sorting, divide and conquer, balanced trees and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "sorting",
    "searching",
    "avl tree",
    "red-black tree",
    "union-find",
    "hash map",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algostructs-combinations = "algostructs.combinatorics:main"

[tool.hatch.build.targets.wheel]
packages = ["algostructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
