[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafos"
version = "0.1.0"
description = "Small directed graphs as adjacency lists and matrices, with searches, paths, cycles and graph operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency list", "adjacency matrix", "bfs", "dfs", "cycles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["grafos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
