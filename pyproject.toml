[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "joywork"
version = "0.1.0"
description = "Classic data structures, small algorithms and binary serialization helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "binary-search-tree",
    "avl-tree",
    "splay-tree",
    "dynamic-array",
    "serialization",
    "byte-order",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["joywork"]

[tool.pytest.ini_options]
addopts = "-ra"
