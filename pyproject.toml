[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fitbitapi"
version = "0.1.0"
description = "A small client for the Fitbit Web API with typed sleep and activity responses and a per-date response cache"
requires-python = ">=3.10"
dependencies = []
keywords = ["fitbit", "api", "health", "fitness", "sleep", "activity"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fitbitapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
