[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fingerprint_core"
version = "0.1.0"
description = "Geometry, packed bit maps, block maps, matcher records and binary array I/O for fingerprint image processing"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["fingerprint", "biometrics", "image processing", "binary map", "block map", "pgm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fingerprint_core"]

[tool.pytest.ini_options]
addopts = "-ra"
