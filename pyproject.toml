[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gp2040kit"
version = "0.1.0"
description = "LED animation engine, CRC-32, emulated EEPROM, option records and board presets for arcade-stick controllers"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamepad", "arcade", "leds", "animation", "rgb", "crc32", "eeprom"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gp2040kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
