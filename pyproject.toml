[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bintrees_kit"
version = "0.1.0"
description = "Binary trees with parent links: traversal, measurements, rotations, binary search trees, AVL trees and text rendering."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "bst", "avl", "data structures", "tree traversal"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bintrees_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
