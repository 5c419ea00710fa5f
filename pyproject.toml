[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "automatakit"
version = "0.1.0"
description = "Finite automata toolkit: DFAs, lambda-NFAs, subset construction and regular expressions."
requires-python = ">=3.10"
dependencies = []
keywords = ["automata", "dfa", "nfa", "regular-expressions", "thompson", "subset-construction"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["automatakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
