[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roseengine"
version = "0.1.0"
description = "A small 2D game engine with an entity-component-system core and instanced OpenGL sprite rendering"
requires-python = ">=3.10"
keywords = ["game engine", "2d", "ecs", "entity component system", "opengl", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
roseengine-demo = "roseengine.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["roseengine"]

[tool.pytest.ini_options]
addopts = "-ra"
