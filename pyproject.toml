[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldreflect"
version = "0.1.0"
description = "Field-wise reflection for plain record classes: access, names, comparison, hashing and text I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["reflection", "dataclasses", "namedtuple", "fields", "comparison", "hashing", "serialization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fieldreflect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
