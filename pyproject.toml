[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kotanama"
version = "1.0.0"
description = "Interactive console directory of cities and the names registered in each city"
requires-python = ">=3.10"
dependencies = []
keywords = ["directory", "cities", "names", "console", "linked-list", "customer-service"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kotanama = "kotanama.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kotanama"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
