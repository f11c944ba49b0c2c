[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boltframes"
version = "0.1.0"
description = "Reassemble chunked Bolt protocol messages from a byte stream"
requires-python = ">=3.10"
dependencies = []
keywords = ["bolt", "chunking", "framing", "protocol", "graph database"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boltframes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
