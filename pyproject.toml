[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astrocel"
version = "0.1.0"
description = "Orbital mechanics helpers: integrators, two-body dynamics, reference frames, colour themes and scene utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["orbital mechanics", "astrodynamics", "runge-kutta", "reference frames", "quaternions", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["astrocel"]

[tool.pytest.ini_options]
addopts = "-ra"
