[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dodgefield"
version = "0.1.0"
description = "A terminal arcade game: steer through a walled field, collect hearts and dodge chasing enemies."
requires-python = ">=3.10"
keywords = ["game", "terminal", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dodgefield = "dodgefield.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dodgefield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
