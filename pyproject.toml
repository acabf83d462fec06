[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolebox"
version = "0.1.0"
description = "Small interactive console programs: a number guessing game, a scientific calculator and a school records manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "game", "calculator", "school", "grades", "interactive"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolebox-guess = "consolebox.guessing:main"
consolebox-calc = "consolebox.calculator:main"
consolebox-school = "consolebox.school_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["consolebox"]

[tool.pytest.ini_options]
addopts = "-ra"
