[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gracejoin"
version = "0.1.0"
description = "A simulated Grace hash join over a paged disk and a fixed-size memory buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "hash join", "grace hash join", "query processing", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gracejoin = "gracejoin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gracejoin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
