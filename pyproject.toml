[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "watersort"
version = "0.1.0"
description = "Solver for the water sort (liquid sorting) puzzle using breadth-first and depth-first search"
requires-python = ">=3.10"
keywords = ["puzzle", "water sort", "solver", "bfs", "dfs", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
watersort = "watersort.game:main"

[tool.hatch.build.targets.wheel]
packages = ["watersort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
