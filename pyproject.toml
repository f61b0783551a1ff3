[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drago3d"
version = "1.0.1"
description = "Small 3D math toolkit: vectors, 4x4 matrices, collision shapes, 3D value grids and host system information."
requires-python = ">=3.10"
dependencies = ["psutil"]
keywords = ["vector", "matrix", "3d", "geometry", "collision", "grid", "system-information"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drago3d"]

[tool.pytest.ini_options]
addopts = "-ra"
