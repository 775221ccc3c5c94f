[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "x16demos"
version = "0.1.0"
description = "Small console demo programs: hello world, colour blocks, a text menu and a number guessing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["demo", "console", "teaching", "games", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
x16-hello = "x16demos.basics:main"
x16-screen = "x16demos.screen:main"
x16-menu = "x16demos.menu:main"
x16-numberguess = "x16demos.numberguess:main"

[tool.hatch.build.targets.wheel]
packages = ["x16demos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
