[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skychart"
version = "0.1.0"
description = "Planar and spatial vectors, constellation names and a compact analytic model of Sun, Moon and planet positions"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "ephemeris", "planets", "moon", "constellations", "vectors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["skychart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
