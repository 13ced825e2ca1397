[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fujiconfig"
version = "0.1.0"
description = "Model of a FujiNet configuration front end: text screen drawing, app-key preferences and a module runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["fujinet", "config", "apple2", "atari", "retro", "conio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fujiconfig = "fujiconfig.runner:main"
fujiconfig-mock = "fujiconfig.mock_screen:main"

[tool.hatch.build.targets.wheel]
packages = ["fujiconfig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
