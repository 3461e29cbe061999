[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arbitration_graphs"
version = "0.1.0"
description = "Hierarchical behavior models built from behaviors and arbitrators, with verification of every command"
requires-python = ">=3.10"
dependencies = []
keywords = ["behavior planning", "arbitration", "decision making", "robotics", "pathfinding", "a-star"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["arbitration_graphs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
