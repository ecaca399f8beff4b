[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "pushswap"
version = "1.0.0"
description = "Sort integers on two stacks with a limited instruction set and print the instructions used"
requires-python = ">=3.10"
dependencies = []
keywords = ["push_swap", "stack", "sorting", "radix sort", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
push-swap = "pushswap.cli:main"

[tool.setuptools.packages.find]
include = ["pushswap*"]

[tool.pytest.ini_options]
addopts = "-ra"
