[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prioqueue"
version = "0.1.0"
description = "Max-priority queues (unsorted array and binary heap) with FIFO tie-breaking and an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "heap", "data structures", "max-heap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
prioqueue = "prioqueue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prioqueue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
