[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gomaze"
version = "0.1.0"
description = "A small tile-based maze arcade game: collect apples while ghosts roam the corridors."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "maze", "pygame", "ghosts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gomaze = "gomaze.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gomaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
