[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bloomfx"
version = "0.1.0"
description = "Floating-point raster images with bilinear sampling, up/downsampling filters and blending"
requires-python = ">=3.10"
keywords = ["image", "filter", "bilinear", "downsample", "upsample", "raster"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bloomfx"]

[tool.pytest.ini_options]
addopts = "-ra"
