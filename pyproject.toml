[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "innoread"
version = "0.1.0"
description = "Readers for Inno Setup version data, CRC-checked chunk streams and the PE structures of Windows executables"
requires-python = ">=3.10"
dependencies = []
keywords = ["innosetup", "inno", "pe", "portable-executable", "installer", "crc32"]
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
    "Topic :: System :: Archiving :: Packaging",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["innoread"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
