[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oiseau"
version = "0.1.0"
description = "Reference cells, unstructured mesh topology and geometry, jagged arrays and mesh plotting"
requires-python = ">=3.10"
keywords = ["mesh", "finite elements", "reference cell", "topology", "jagged array"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
    "matplotlib",
]

[tool.hatch.build.targets.wheel]
packages = ["oiseau"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
