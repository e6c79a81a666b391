[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ltlengine"
version = "0.1.0"
description = "Larger than Life cellular automaton engine with Moore and von Neumann neighbourhoods"
requires-python = ">=3.10"
dependencies = []
keywords = ["cellular-automaton", "larger-than-life", "game-of-life", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ltlengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
