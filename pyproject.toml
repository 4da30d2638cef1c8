[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gorobot"
version = "0.1.0"
description = "A small 2D simulation of round objects bouncing around a gridded world."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["simulation", "pygame", "2d", "bouncing", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gorobot = "gorobot.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["gorobot"]

[tool.pytest.ini_options]
addopts = "-ra"
