[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstructs"
version = "0.1.0"
description = "Classic data structures with ASCII tree drawings: linked lists, binary search trees, AVL trees and heaps"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "binary-search-tree",
    "avl-tree",
    "priority-queue",
    "heap",
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dstructs-lists = "dstructs.list_demo:main"
dstructs-pq = "dstructs.pq_demo:main"
dstructs-trees = "dstructs.tree_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["dstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
