[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rkeconfig"
version = "0.1.0"
description = "Convert RKE cluster configuration sections between dataclasses and flat schema data"
requires-python = ">=3.10"
dependencies = []
keywords = ["rke", "kubernetes", "cluster", "configuration", "schema"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rkeconfig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
