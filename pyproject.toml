[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prog3basics"
version = "0.1.0"
description = "Small value types and helpers: bag, fraction, point, 3D vector, polynomial, product, and append-only file loggers"
requires-python = ">=3.10"
dependencies = []
keywords = ["fraction", "polynomial", "vector", "geometry", "logger", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["prog3basics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
