[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cslib"
version = "0.1.0"
description = "Teaching-oriented collections, file helpers, option parsing and an in-memory graphics object model"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "education",
    "collections",
    "graph",
    "priority-queue",
    "graphics",
    "events",
    "options",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cslib"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
