[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "errorplus"
version = "0.0.1"
description = "Exceptions that carry a cause, a captured call trace, tags and a severity, with configurable verbose reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["errors", "exceptions", "traceback", "wrapping", "diagnostics"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
errorplus-playground = "errorplus.playground:main"

[tool.hatch.build.targets.wheel]
packages = ["errorplus"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
