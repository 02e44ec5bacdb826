[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "affinelp"
version = "0.1.0"
description = "Affine scaling interior-point method and tableau simplex method for small linear programs"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "linear programming",
    "optimization",
    "simplex",
    "affine scaling",
    "interior point",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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

[project.scripts]
affinelp-cases = "affinelp.cases:main"

[tool.hatch.build.targets.wheel]
packages = ["affinelp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
