[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numethods"
version = "0.1.0"
description = "Numerical methods toolkit: expression parsing, root finding, integration and interpolation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "bisection",
    "secant",
    "simpson",
    "trapezoidal",
    "lagrange",
    "divided-differences",
    "interpolation",
    "expression-parser",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numethods = "numethods.cli:main"
numethods-bisection = "numethods.bisection:main"
numethods-secant = "numethods.secant:main"
numethods-integrate = "numethods.integration:main"
numethods-lagrange = "numethods.lagrange:main"
numethods-divided-difference = "numethods.divided_difference:main"

[tool.hatch.build.targets.wheel]
packages = ["numethods"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
