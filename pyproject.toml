[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arkstd"
version = "0.5.0"
description = "Small utilities: in-memory byte readers and writers, reusable iterables, timing traces and a test RNG"
requires-python = ">=3.10"
keywords = ["io", "iterable", "tracing", "timing", "rng", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["arkstd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
