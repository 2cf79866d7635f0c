[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitensor"
version = "0.1.0"
description = "Small float tensors of up to four dimensions with reductions, broadcasting, gradient clipping and dataset helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tensor", "broadcasting", "reduction", "gradient-clipping", "dataset"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minitensor"]

[tool.pytest.ini_options]
addopts = "-ra"
