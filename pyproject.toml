[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fauxgen"
version = "0.1.0"
description = "Seedable fake data: fixed-width numbers, hex strings, UUIDs, network addresses, noise images and JSON documents"
requires-python = ">=3.10"
keywords = ["fake", "test data", "random", "generator", "fixtures"]
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
    "Topic :: Software Development :: Testing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fauxgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
