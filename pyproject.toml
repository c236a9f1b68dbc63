[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "intervalarith"
version = "0.1.0"
description = "Proper and directed interval arithmetic on multiple-precision reals"
requires-python = ">=3.10"
dependencies = [
    "mpmath",
]
keywords = [
    "interval arithmetic",
    "directed intervals",
    "Kaucher arithmetic",
    "outward rounding",
    "multiple precision",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
packages = ["intervalarith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
