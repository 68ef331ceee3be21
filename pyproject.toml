[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic data structures and algorithms: binary search trees, stacks, sorting, graphs and maximum flow."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-search-tree",
    "quicksort",
    "heapsort",
    "max-flow",
    "bipartite-matching",
    "path-cover",
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
algolab-bst = "algolab.bst:main"
algolab-median = "algolab.median:main"
algolab-quicksort = "algolab.quicksort:main"
algolab-stack = "algolab.stack:main"
algolab-heapsort = "algolab.heapsort:main"
algolab-graph = "algolab.graph:main"
algolab-evacuation = "algolab.evacuation:main"
algolab-airline-crews = "algolab.airline_crews:main"
algolab-stock-charts = "algolab.stock_charts:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"
