[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtkit"
version = "0.1.0"
description = "String, memory, number-conversion and line-reading helpers plus scene-description vocabulary for a ray tracer"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "bytes", "line-reader", "ray-tracer", "scene"]
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
packages = ["rtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
