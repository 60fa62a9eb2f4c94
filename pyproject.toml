[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particle_evolution"
version = "0.1.0"
description = "A 2D charged-particle sandbox where particles attract, repel, collide and form bonds."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["particles", "simulation", "chemistry", "artificial life", "pygame"]
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
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
particle-evolution = "particle_evolution.app:main"

[tool.hatch.build.targets.wheel]
packages = ["particle_evolution"]

[tool.pytest.ini_options]
addopts = "-ra"
