[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "papercut"
version = "0.1.2"
description = "A library and command-line tool for slicing images into tiles and joining them back together."
requires-python = ">=3.10"
keywords = ["image", "slicing", "tiles", "processing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
papercut = "papercut.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["papercut"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
