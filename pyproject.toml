[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treelab"
version = "0.1.0"
description = "Small teaching data structures: a cube value type, a complete binary tree with traversals, and a self-checking AVL tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "binary tree", "tree traversal", "data structures", "education"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
treelab-traversals = "treelab.traversal_demo:main"
treelab-avl = "treelab.avl_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["treelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
