[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tradovateimport"
version = "0.1.0"
description = "Load Tradovate performance and cash CSV reports into an SQLite database."
requires-python = ">=3.10"
dependencies = []
keywords = ["tradovate", "trading", "csv", "sqlite", "import"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tradovateimport = "tradovateimport.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tradovateimport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
