[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyclinic"
version = "0.1.0"
description = "A small domain model of a polyclinic: patients, staff, rooms, wards, appointment cards and a registry."
requires-python = ">=3.10"
dependencies = []
keywords = ["polyclinic", "clinic", "patients", "hospital", "domain-model"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polyclinic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
