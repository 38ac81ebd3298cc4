[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robomath"
version = "0.1.0"
description = "Typed units, controllers, feedforward models, filters and 2D/3D geometry for robot control code, with a simple periodic robot loop."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "robotics",
    "units",
    "pid",
    "feedforward",
    "geometry",
    "pose",
    "quaternion",
    "control",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robomath"]

[tool.pytest.ini_options]
addopts = "-ra"
