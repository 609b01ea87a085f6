[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lone_sentry"
version = "0.1.0"
description = "A small 2D arcade game: steer a sentry ship along the bottom of the screen and fire missiles, drawn with OpenGL through pyglet."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "opengl", "pyglet", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "numpy",
    "pillow",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lone-sentry = "lone_sentry.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lone_sentry"]

[tool.pytest.ini_options]
addopts = "-ra"
