[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prosys7800"
version = "0.1.0"
description = "Atari 7800 hardware components: memory map, RIOT, MARIA, POKEY, palettes, regions and save states"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "atari", "7800", "maria", "pokey", "riot"]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["prosys7800"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
