[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacewar"
version = "0.1.0"
description = "A small vertical-scrolling space shooter with enemy waves and a diving boss"
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "space"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spacewar = "spacewar.main:main"

[tool.hatch.build.targets.wheel]
packages = ["spacewar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
