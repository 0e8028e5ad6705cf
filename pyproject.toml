[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slbar"
version = "1.0.0"
description = "Small status line generator: prints system information such as time, load, memory, battery and network at a fixed interval"
requires-python = ">=3.10"
keywords = ["status", "statusbar", "monitoring", "battery", "cpu", "memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slbar = "slbar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slbar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
