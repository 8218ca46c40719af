[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Classic algorithm exercises: random tree shapes, combinatorics, subarrays, fillable arrays and small puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "random tree",
    "set partitions",
    "maximum subarray",
    "hypergeometric",
    "serializability",
    "education",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslab-random-tree = "dslab.randomtree:main"
dslab-triangle = "dslab.basics:triangle_main"
dslab-stddev = "dslab.basics:stddev_main"
dslab-partitions = "dslab.partitions:main"
dslab-subarray = "dslab.subarray:main"
dslab-fillable = "dslab.fillable:main"
dslab-hypergeom = "dslab.hypergeom:main"
dslab-products = "dslab.products:main"
dslab-arrange = "dslab.arrange:main"
dslab-primepairs = "dslab.primepairs:main"
dslab-serializability = "dslab.serializability:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
