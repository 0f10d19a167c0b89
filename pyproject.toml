[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adamant"
version = "0.1.0"
description = "A small pure-Python n-dimensional tensor library with row- and column-major layouts, views and slicing."
requires-python = ">=3.10"
dependencies = []
keywords = ["tensor", "ndarray", "linear-algebra", "matrix", "numerical"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adamant-demo = "adamant.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["adamant"]

[tool.pytest.ini_options]
addopts = "-ra"
