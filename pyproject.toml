[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bidb"
version = "0.1.0"
description = "A small in-memory database with bitmap indexes and chainable AND/OR/AND-NOT queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "in-memory", "bitmap", "index", "query"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bidb-example = "bidb.example:main"

[tool.hatch.build.targets.wheel]
packages = ["bidb"]

[tool.pytest.ini_options]
addopts = "-ra"
