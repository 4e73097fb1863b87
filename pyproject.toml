[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guardian-sky"
version = "0.1.0"
description = "Headless game logic for a 3D rail shooter: affine maths, world transforms, lights, texture handles, scenes, player, enemies and bullets"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rail-shooter", "affine", "matrix", "3d", "transform"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["guardian_sky"]

[tool.pytest.ini_options]
addopts = "-ra"
