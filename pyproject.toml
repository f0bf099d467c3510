[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeitclock"
version = "0.1.0"
description = "Control logic for an LED matrix wall clock: settings, calendar, menu, screen layouts and sound level metering"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "clock",
    "led-matrix",
    "hub75",
    "menu",
    "sound-level",
    "a-weighting",
]
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
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zeitclock"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
