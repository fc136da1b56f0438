[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubtools"
version = "0.1.0"
description = "Small utilities: XPM image decoding, X11 colour names, buffered line reading, printf-style formatting, string, byte and linked-list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "colors", "x11", "printf", "strings", "linked-list", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubtools"]

[tool.pytest.ini_options]
addopts = "-ra"
