[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nttlab"
version = "0.1.0"
description = "Polynomial multiplication modulo a prime with the number-theoretic transform and Montgomery arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["ntt", "number-theoretic transform", "montgomery", "polynomial multiplication", "modular arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
nttlab = "nttlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nttlab"]

[tool.pytest.ini_options]
addopts = "-ra"
