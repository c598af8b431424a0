[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splatkit"
version = "0.1.0"
description = "Tools for preparing SPLAT! RF propagation runs: coordinates, LRP parameters, command lines and workspace files"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "splat",
    "rf",
    "propagation",
    "longley-rice",
    "ham radio",
    "coordinates",
    "lrp",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
splatkit = "splatkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["splatkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
