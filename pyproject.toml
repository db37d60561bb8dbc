[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lbslocation"
version = "0.1.0"
description = "Location service data types, parcel serialisation, per-user settings and a geocode service skeleton"
requires-python = ">=3.10"
dependencies = []
keywords = ["location", "gnss", "geocode", "geofence", "parcel"]
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lbslocation"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
