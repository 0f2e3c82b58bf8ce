[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpusim"
version = "0.1.0"
description = "Gate-level building blocks for a simple CPU: logic gates, adders, multiplexers, shifters, flip-flops, registers and memory"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpu", "simulation", "logic gates", "digital logic", "emulator", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpusim-demo = "cpusim.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["cpusim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
