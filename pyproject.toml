[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fenix"
version = "0.1.0"
description = "Building blocks of a small kernel: intrusive lists, address parsing, DNS wire constants, a round-robin task scheduler, console and shell."
requires-python = ">=3.10"
dependencies = []
keywords = ["kernel", "scheduler", "linked-list", "inet", "dns", "embedded"]
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
    "Topic :: System :: Operating System Kernels",
    "Topic :: Software Development :: Embedded Systems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fenix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
