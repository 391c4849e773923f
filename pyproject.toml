[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algolab"
version = "0.1.0"
description = "Small algorithm and data-structure exercises with command-line drivers"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "exercises", "sorting", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-missing = "algolab.missing:main"
algolab-iteration = "algolab.iteration:main"
algolab-stl = "algolab.stl_cli:main"
algolab-tasklist = "algolab.tasklist:main"
algolab-invalidation = "algolab.invalidation:main"
algolab-improve = "algolab.improve_cli:main"

[tool.setuptools.packages.find]
include = ["algolab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
