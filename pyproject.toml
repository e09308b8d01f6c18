[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frogboss"
version = "0.1.0"
description = "A small arcade boss fight against a tongue-lashing, leaping frog"
requires-python = ">=3.10"
keywords = ["game", "arcade", "boss-fight", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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
frogboss = "frogboss.game:main"

[tool.hatch.build.targets.wheel]
packages = ["frogboss"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
