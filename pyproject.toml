[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wideint"
version = "0.1.0"
description = "Radix formatting and stream-style parsing of signed and unsigned 128-bit integers"
requires-python = ">=3.10"
dependencies = []
keywords = ["int128", "uint128", "integer", "formatting", "parsing", "radix", "octal", "hex"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["wideint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
