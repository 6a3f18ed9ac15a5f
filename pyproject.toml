[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeworld"
version = "0.1.0"
description = "A terminal snake game built on a small entity-component-system world"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "ecs", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakeworld = "snakeworld.game:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
