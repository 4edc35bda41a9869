[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ergani"
version = "0.1.0"
description = "Client for the Ergani labour-declaration API: work cards, overtime and work schedules"
requires-python = ">=3.10"
dependencies = [
    "requests>=2.28",
]
keywords = ["ergani", "work card", "overtime", "work schedule", "labour", "api client"]
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
    "Topic :: Office/Business",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
ergani = "ergani.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ergani"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
