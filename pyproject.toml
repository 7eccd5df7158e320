[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kokiri"
version = "0.1.0"
description = "A small 2D game engine with scenes, entities, components and a resource pool"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "2d", "ecs", "scene", "pygame"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kokiri-demo = "kokiri.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["kokiri"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
