[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pointmap"
version = "0.1.0"
description = "Keep a list of described map points: add, edit and delete points chosen on a map."
requires-python = ">=3.10"
dependencies = []
keywords = ["map", "points", "gis", "coordinates", "markers"]
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pointmap = "pointmap.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pointmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
