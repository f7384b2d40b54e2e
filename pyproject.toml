[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schemeprims"
version = "0.1.0"
description = "Built-in primitive procedures for a Scheme (R5RS) interpreter: numbers, characters, strings, pairs, vectors and predicates"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheme", "r5rs", "lisp", "interpreter", "primitives"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["schemeprims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
