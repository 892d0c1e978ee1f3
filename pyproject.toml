[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circlesim"
version = "0.1.0"
description = "A small 2D circle physics sandbox built on a generational entity-component store"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["ecs", "entity-component-system", "physics", "simulation", "2d", "sandbox"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
circlesim = "circlesim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["circlesim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
