[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dequemu"
version = "0.1.0"
description = "Interactive emulator of a double-ended queue of strings with a cursor and standard algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["deque", "iterator", "cursor", "algorithms", "merge-sort", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: English",
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
dequemu = "dequemu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dequemu"]

[tool.pytest.ini_options]
addopts = "-ra"
