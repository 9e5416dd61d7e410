[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficrecords"
version = "0.1.0"
description = "Keep vehicle-owner and traffic-violation records from CSV files, find probable addressees and record accident evidence"
requires-python = ">=3.10"
dependencies = []
keywords = ["traffic", "violations", "vehicle", "csv", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
traffic-owners = "trafficrecords.owners:main"
traffic-violations = "trafficrecords.violations:main"
traffic-addressees = "trafficrecords.addressees:main"
traffic-evidence = "trafficrecords.evidence:main"

[tool.hatch.build.targets.wheel]
packages = ["trafficrecords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
