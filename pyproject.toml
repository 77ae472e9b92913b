[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuplestorm"
version = "0.1.0"
description = "Building blocks for a word-count and top-N ranking stream pipeline: tuples, hashing, grouping, topologies and components"
requires-python = ">=3.10"
dependencies = []
keywords = ["stream processing", "tuples", "topology", "spout", "bolt", "jenkins hash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuplestorm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
