[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cobaltc"
version = "1.0.0"
description = "Intermediate representation, assembly tree and DOT graph printer for a small C compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "c", "intermediate-representation", "three-address-code", "x86-64", "graphviz"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cobaltc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
