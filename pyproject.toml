[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gatesim"
version = "0.1.0"
description = "Interactive logic gate simulator: place gates, wire them up and watch signals propagate"
requires-python = ">=3.10"
keywords = ["logic", "gates", "circuit", "simulator", "digital", "pygame"]
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gatesim = "gatesim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gatesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
