[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acequia"
version = "0.1.0"
description = "A water-management simulation of regions, water sources and canals, driven hour by hour by a canal strategy"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "water", "acequia", "education", "canals"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
acequia-generate = "acequia.generator:main"
acequia-simulate = "acequia.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["acequia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
