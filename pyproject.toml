[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knap"
version = "0.1.0"
description = "Optimal and greedy solvers for the 0/1 knapsack problem, exposed as iterators over chosen items."
requires-python = ">=3.10"
dependencies = []
keywords = ["knapsack", "optimization", "dynamic-programming", "greedy", "combinatorics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["knap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
