[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minisysc"
version = "0.1.0"
description = "A minimal discrete-event simulation kernel with SystemC-style time, events, modules and transaction payloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "systemc", "tlm", "kernel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minisysc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
