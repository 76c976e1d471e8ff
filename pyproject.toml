[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fbgraphics"
version = "0.1.0"
description = "Pixel-level 2D drawing on a Linux framebuffer or an in-memory canvas: lines, circles, fills, clipping, simple physics and a small plane-shooting game"
requires-python = ">=3.10"
dependencies = []
keywords = ["framebuffer", "graphics", "bresenham", "flood-fill", "clipping", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Framebuffer",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fbgraphics-game = "fbgraphics.app:main"
fbgraphics-paint = "fbgraphics.paint:main"

[tool.hatch.build.targets.wheel]
packages = ["fbgraphics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
