[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelchunk"
version = "0.1.0"
description = "A small voxel chunk editor: fill, inspect and edit a 3D grid of blocks with a cube cursor."
requires-python = ">=3.10"
keywords = ["voxel", "chunk", "blocks", "3d", "editor", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxelchunk = "voxelchunk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["voxelchunk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
