[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prayertimes"
version = "0.1.0"
description = "Show daily prayer times in the terminal, with the time left to the next prayer"
requires-python = ">=3.10"
keywords = ["prayer", "prayer-times", "salah", "cli", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
prayers = "prayertimes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prayertimes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
