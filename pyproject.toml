[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldrobot"
version = "0.1.0"
description = "Geometry, file, logging, GNSS correction and job supervision utilities for an autonomous field robot"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["robotics", "agriculture", "geometry", "ntrip", "gnss", "docker", "process supervision"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fieldrobot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
