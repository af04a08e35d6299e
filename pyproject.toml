[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subleq_spire"
version = "0.1.0"
description = "Battle royale arena where SUBLEQ programs fight in shared memory, with ELO ranking, a Hall of Fame and a replay buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["subleq", "oisc", "virtual-machine", "core-war", "elo", "artificial-life"]
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
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["subleq_spire"]

[tool.pytest.ini_options]
addopts = "-ra"
