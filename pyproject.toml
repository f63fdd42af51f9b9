[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chiprunner"
version = "0.1.0"
description = "Game logic pieces for a tile-map side-scrolling platformer: map chips, player physics, enemies, particles, lights and a title scene."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scroller", "tilemap", "collision", "aabb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chiprunner"]

[tool.pytest.ini_options]
addopts = "-ra"
