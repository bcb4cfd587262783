[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slimage"
version = "0.1.0"
description = "Read, write, view and paint SLImage (.slmg) raster images"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "raster", "slmg", "paint", "viewer", "file-format"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slimage = "slimage.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slimage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
