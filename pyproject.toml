[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "byteemu"
version = "0.1.0"
description = "Emulator and disassembler for a small 8-bit instruction set, with assembler front-end support types"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "8-bit", "disassembler", "cpu", "macro"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
byteemu = "byteemu.cli:main"
byteemu-disassemble = "byteemu.disassemble_file:main"

[tool.hatch.build.targets.wheel]
packages = ["byteemu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
