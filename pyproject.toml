[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizx"
version = "0.1.0"
description = "Exact phases, scalars, parity expressions and F2 linear algebra for ZX-calculus work"
requires-python = ">=3.10"
dependencies = []
keywords = ["zx-calculus", "quantum", "scalar", "phase", "linear-algebra", "gf2"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quizx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
