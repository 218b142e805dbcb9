[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codelessons"
version = "0.1.0"
description = "Small worked examples: linked lists, bit grids, packed dates, log parsing, key/value files and SQLite helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "examples",
    "linked-list",
    "flood-fill",
    "bitfields",
    "sqlite",
    "log-parsing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codelessons-dps = "codelessons.dps:main"
codelessons-keyvalue = "codelessons.keyvalue:main"

[tool.hatch.build.targets.wheel]
packages = ["codelessons"]

[tool.hatch.build.targets.sdist]
include = ["codelessons", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
