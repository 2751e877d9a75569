[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "reactorsim"
version = "0.1.0"
description = "Discrete simulation of a nuclear fission reactor with atoms, activation, feeding and energy withdrawal"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "fission", "reactor", "energy"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reactorsim = "reactorsim.cli:main"

[tool.setuptools.packages.find]
include = ["reactorsim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
