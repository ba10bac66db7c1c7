[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilebreaker"
version = "0.1.0"
description = "A tile-breaking side-scrolling arcade game with a built-in GIF decoder and animation player"
requires-python = ">=3.10"
keywords = ["game", "arcade", "platformer", "pygame", "gif", "tiles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilebreaker = "tilebreaker.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tilebreaker"]

[tool.pytest.ini_options]
addopts = "-ra"
