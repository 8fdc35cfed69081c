[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicheck"
version = "0.1.0"
description = "Compilation listing, symbol table, token kinds and semantic type checks for a small teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "type checking", "symbol table", "listing", "semantic analysis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
packages = ["minicheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
