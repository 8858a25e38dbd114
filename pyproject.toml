[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "senseshift"
version = "0.1.0"
description = "Haptic body model, output planes and bHaptics payload decoding for wearable haptic devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["haptics", "bhaptics", "vibration", "wearables", "vr"]
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
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["senseshift"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
