[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxdock"
version = "1.0.0"
description = "Voxelized protein pocket grids, ligand models and random ligand pose generation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["docking", "ligand", "pocket", "voxel", "mol2", "molecular"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxdock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
