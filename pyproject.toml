[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Operating-systems study toolkit: a red-black tree, a process model, a bounded thread-safe queue and a coin-flip histogram"
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "process", "bounded queue", "histogram", "operating systems"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab-rb-example = "oslab.example:main"
oslab-slice = "oslab.slice:main"
oslab-histogram = "oslab.histogram:main"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
