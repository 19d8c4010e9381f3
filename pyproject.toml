[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlsxparts"
version = "0.1.0"
description = "Read and write the shared-strings, styles and theme parts of .xlsx workbooks"
requires-python = ">=3.10"
dependencies = []
keywords = ["xlsx", "spreadsheet", "ooxml", "excel", "styles", "shared strings", "theme"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlsxparts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
