[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flightdesk"
version = "0.1.0"
description = "Terminal flight-control desk: register aircraft, pilots, passengers and flights, stored as CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "aircraft", "scheduling", "csv", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flightdesk = "flightdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flightdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
