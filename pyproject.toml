[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logwindow"
version = "0.1.0"
description = "Analyse web server access logs: collect 5XX errors, rank failing requests and find the busiest time window."
requires-python = ">=3.10"
dependencies = []
keywords = ["logs", "access-log", "http", "5xx", "analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logwindow = "logwindow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["logwindow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
