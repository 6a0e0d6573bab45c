[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures, sorting and dynamic-programming algorithms, and small object-modelling exercises in plain Python."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "dynamic-programming",
    "binary-tree",
    "binary-search-tree",
    "heap",
    "linked-list",
    "stack",
    "queue",
    "ring-buffer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgo-bounded = "dsalgo.bounded:main"
dsalgo-students = "dsalgo.students:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgo"]

[tool.hatch.build.targets.sdist]
include = ["dsalgo", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
