[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soupsearch"
version = "1.0.0"
description = "Candidate handling, distillation, angle formatting and search options for pulsar acceleration searches"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pulsar",
    "radio astronomy",
    "sigproc",
    "acceleration search",
    "candidates",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["soupsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
