[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anchor"
version = "0.1.0"
description = "Command-line file toolkit: show file contents, compute file hashes and format JSON, XML, YAML and Markdown files"
requires-python = ">=3.10"
keywords = ["cli", "hash", "md5", "sha1", "sha256", "sha512", "formatter", "json", "xml", "yaml", "markdown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
    "pyyaml",
    "markdown",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
anchor = "anchor.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["anchor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
