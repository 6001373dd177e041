[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsoncodegen"
version = "0.1.0"
description = "Building blocks for generating C++ JSON serializer source code"
requires-python = ">=3.10"
keywords = ["json", "code generation", "c++", "serializer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: C++",
    "Topic :: Software Development :: Code Generators",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsoncodegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
