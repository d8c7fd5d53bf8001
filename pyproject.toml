[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algorithmica"
version = "0.1.0"
description = "Classic algorithms and data-structure exercises: sorting, searching, strings, arrays, matrices, graphs, trees, linked lists, checksums and sudoku."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "graphs",
    "trees",
    "linked-list",
    "checksum",
    "sudoku",
    "education",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algorithmica-checksum = "algorithmica.checksum:main"

[tool.hatch.build.targets.wheel]
packages = ["algorithmica"]

[tool.hatch.build.targets.sdist]
include = ["algorithmica", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
