[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagelayout"
version = "0.1.0"
description = "Layout and styling primitives for an HTML rendering host: CSS values, boxes, fonts and URL resolution."
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "css", "layout", "rendering", "browser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pagelayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
