[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightpath"
version = "0.1.0"
description = "Geometric ray tracing of light through spherical lenses and flat mirrors"
requires-python = ">=3.10"
dependencies = []
keywords = ["optics", "ray tracing", "refraction", "reflection", "snell", "lens", "mirror"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lightpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
