[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lepkefing"
version = "0.1.0"
description = "Liquid-style templating, lightweight markdown conversion and page JSON output for static sites"
requires-python = ">=3.10"
dependencies = []
keywords = ["static site", "liquid", "templates", "markdown", "site generator"]
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
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lepkefing"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
