[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwalk"
version = "0.1.0"
description = "Adjacency-matrix graphs with degrees, BFS, DFS, topological sort and Dijkstra, plus an interactive prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "dfs", "dijkstra", "topological-sort", "adjacency-matrix"]
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphwalk = "graphwalk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
