[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "zorbworld"
version = "0.1.0"
description = "A small top-down world simulation with a camera, sprite-map animations and a tiny entity-component system"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "ecs", "simulation", "sprite", "aseprite", "camera", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zorbworld = "zorbworld.app:main"

[tool.setuptools.packages.find]
include = ["zorbworld*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
