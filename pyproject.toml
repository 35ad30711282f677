[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fooddispatch"
version = "0.1.0"
description = "Terminal food delivery order system: queue orders, dispatch them to the earliest free driver, and track deliveries."
requires-python = ">=3.10"
dependencies = []
keywords = ["food delivery", "dispatch", "orders", "drivers", "simulation", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
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
fooddispatch = "fooddispatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fooddispatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
