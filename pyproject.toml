[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motormarket"
version = "0.1.0"
description = "A console marketplace for listing, browsing and removing new cars, used cars and bikes"
requires-python = ">=3.10"
dependencies = []
keywords = ["marketplace", "vehicles", "cars", "bikes", "console", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
motormarket = "motormarket.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["motormarket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
