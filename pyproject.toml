[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scuolagame"
version = "0.1.0"
description = "A small side-scrolling school adventure with menus, a loading screen and a courtyard scene, built on pygame"
requires-python = ">=3.10"
keywords = ["game", "pygame", "side-scroller", "adventure"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
scuolagame = "scuolagame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["scuolagame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
