[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hazel"
version = "0.1.0"
description = "A small layered 2D rendering engine: events, layers, an orthographic camera and an OpenGL renderer."
requires-python = ">=3.10"
keywords = ["game engine", "rendering", "opengl", "2d", "layers", "events", "camera", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
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

[tool.hatch.build.targets.wheel]
packages = ["hazel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
