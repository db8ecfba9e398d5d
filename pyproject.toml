[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkinglot"
version = "0.1.0"
description = "Parking lot administration: user accounts, lot rates and capacities, custom vehicle rates"
requires-python = ">=3.10"
dependencies = []
keywords = ["parking", "parking-lot", "rates", "administration", "accounts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parkinglot = "parkinglot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parkinglot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
