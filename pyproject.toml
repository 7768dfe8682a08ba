[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abslog"
version = "3.0.0"
description = "A thin logging abstraction with switchable backends and context-aware helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "abstraction", "context", "structured-logging"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
abslog-example = "abslog.example:main"

[tool.hatch.build.targets.wheel]
packages = ["abslog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
