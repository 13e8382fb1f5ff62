[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stormkit"
version = "0.1.0"
description = "Building blocks for 2D games: boxes, interpolation, transforms, timing, images, PNG decoding, rectangle packing, sprite data and an SPSC queue"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "sprite", "aabb", "packer", "png", "spsc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["stormkit"]

[tool.pytest.ini_options]
addopts = "-ra"
