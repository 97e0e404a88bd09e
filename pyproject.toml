[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omnical"
version = "0.11.0"
description = "Print calendars, convert dates between the Gregorian and Chinese calendars, and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "calendar",
    "chinese calendar",
    "lunisolar",
    "gregorian",
    "solar term",
    "lunar phase",
    "julian day",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
omnical = "omnical.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["omnical"]

[tool.pytest.ini_options]
addopts = "-ra"
