[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smlkit"
version = "0.1.0"
description = "Small utility toolkit: error reporting and logging, terminal colours, byte-buffer helpers, growable strings, float vectors and matrices, a minimal argument parser and file helpers."
requires-python = ">=3.11"
dependencies = []
keywords = [
    "utilities",
    "logging",
    "argument-parsing",
    "linear-algebra",
    "strings",
    "buffers",
    "ansi-colors",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smlkit-demo = "smlkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smlkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
