[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Small runnable classic algorithms: graph search, spanning trees, scheduling, backtracking, sorting, a tic-tac-toe opponent and a keyword chatbot."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "dfs",
    "bfs",
    "dijkstra",
    "kruskal",
    "prim",
    "n-queens",
    "a-star",
    "education",
]
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
algolab-tictactoe = "algolab.tictactoe:main"
algolab-traversal = "algolab.traversal:main"
algolab-dijkstra = "algolab.dijkstra:main"
algolab-jobs = "algolab.jobs:main"
algolab-kruskal = "algolab.kruskal:main"
algolab-queens = "algolab.queens:main"
algolab-prim = "algolab.prim:main"
algolab-chatbot = "algolab.chatbot:main"
algolab-sort = "algolab.selection_sort:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
