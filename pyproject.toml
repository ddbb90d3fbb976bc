[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bomby-explody"
version = "0.1.0"
description = "A small arcade game: throw bombs, chain the blasts, stop the advancing enemies."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "bombs"]
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
bomby-explody = "bomby_explody.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bomby_explody"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
