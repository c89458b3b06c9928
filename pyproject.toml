[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridsims"
version = "0.1.0"
description = "Headless game-AI simulations: catch-the-cat on a hex grid, a maze wall grid, Perlin noise and flocking boids"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "simulation",
    "game-ai",
    "pathfinding",
    "hex-grid",
    "maze",
    "perlin-noise",
    "boids",
    "flocking",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridsims-catchthecat = "gridsims.catchthecat:main"
gridsims-flock = "gridsims.flock:main"

[tool.hatch.build.targets.wheel]
packages = ["gridsims"]

[tool.hatch.build.targets.sdist]
include = ["gridsims", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
