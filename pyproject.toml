[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ibbchain"
version = "0.1.0"
description = "Message types, codec registration, genesis validation and a price oracle for an inter-blockchain lending and borrowing module"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "lending", "borrowing", "defi", "genesis", "bech32", "oracle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ibbchain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
