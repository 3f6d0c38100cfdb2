[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitio"
version = "0.1.0"
description = "Bit-level reader and writer over seekable byte streams, with MSB-first and LSB-first bit ordering"
requires-python = ">=3.10"
dependencies = []
keywords = ["bits", "bitstream", "binary", "parsing", "serialization"]
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
packages = ["bitio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
