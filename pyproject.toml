[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmode"
version = "0.1.0"
description = "Configuration model, network edges, a framed binary wire format and file-system helpers for neuro-modular evolution experiments"
requires-python = ">=3.10"
dependencies = []
keywords = ["neuroevolution", "recurrent neural networks", "evolutionary robotics", "configuration", "binary protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nmode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
