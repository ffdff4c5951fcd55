[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atcsim"
version = "0.1.0"
description = "Air traffic control simulation with runway scheduling and airspace violation notices"
requires-python = ">=3.10"
dependencies = []
keywords = ["air traffic control", "simulation", "scheduling", "runway", "threads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
atcsim = "atcsim.orchestrator:main"

[tool.hatch.build.targets.wheel]
packages = ["atcsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
