[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scaradraw"
version = "0.1.0"
description = "Drawing and tic-tac-toe trajectory planner that streams timed points to a five-bar SCARA plotter"
requires-python = ">=3.10"
dependencies = []
keywords = ["scara", "robotics", "trajectory", "plotter", "tic-tac-toe", "geometry"]
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
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scaradraw = "scaradraw.app:main"

[tool.hatch.build.targets.wheel]
packages = ["scaradraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
