[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linregkit"
version = "0.1.0"
description = "Small dense linear algebra toolkit with Gaussian elimination, conjugate gradient and least-squares linear regression"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "matrix",
    "vector",
    "gaussian elimination",
    "conjugate gradient",
    "linear regression",
    "least squares",
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
test = ["pytest"]

[project.scripts]
linregkit = "linregkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linregkit"]

[tool.pytest.ini_options]
addopts = "-ra"
