[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tdcompile"
version = "0.1.0"
description = "Compile an indented top-down outline into a numbered, formatted node list"
requires-python = ">=3.10"
dependencies = []
keywords = ["top-down", "outline", "compiler", "text", "indentation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tdcompile = "tdcompile.compiler:main"

[tool.hatch.build.targets.wheel]
packages = ["tdcompile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
