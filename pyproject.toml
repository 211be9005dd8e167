[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastwild"
version = "1.0.0"
description = "Fast wildcard matching with '*' and '?' for ASCII and Unicode text"
requires-python = ">=3.10"
dependencies = []
keywords = ["wildcard", "glob", "pattern", "matching", "string"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fastwild = "fastwild.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fastwild"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
