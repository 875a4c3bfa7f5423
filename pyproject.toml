[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funciter"
version = "0.1.0"
description = "Lazy, chainable iterators with Option and Result types"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "functional", "option", "result", "lazy", "generator", "channel"]
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
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["funciter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
