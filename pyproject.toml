[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpplan"
version = "0.1.0"
description = "Gaussian-process motion priors, state interpolation, limit penalties, spline segments and small numeric utilities for path planning"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "motion planning",
    "gaussian process",
    "interpolation",
    "penalty function",
    "spline",
    "sparse matrix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gpplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
