[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phpfuncs"
version = "0.1.0"
description = "Familiar PHP built-in functions for strings, arrays, math, dates, files and URLs"
requires-python = ">=3.10"
dependencies = []
keywords = ["php", "strings", "arrays", "utilities", "helpers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
phpfuncs-demo = "phpfuncs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["phpfuncs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
