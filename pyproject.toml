[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubicat"
version = "0.1.0"
description = "2D box collision detection, an RGB565 framebuffer with drawing primitives, ring buffers and CSV-style config tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["collision", "rigid body", "framebuffer", "rgb565", "ring buffer", "config", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubicat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
