[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modbuscrc"
version = "1.0.0"
description = "CRC-16 Modbus RTU calculator with hex frame parsing, timed repetition runs and a Tkinter window"
requires-python = ">=3.10"
dependencies = []
keywords = ["modbus", "modbus-rtu", "crc", "crc16", "checksum", "hex", "benchmark"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
modbuscrc = "modbuscrc.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["modbuscrc"]

[tool.hatch.build.targets.sdist]
include = ["modbuscrc", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
