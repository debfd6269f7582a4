[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursedesk"
version = "0.1.0"
description = "File-backed course management for school years, semesters, general classes, courses and scoreboards"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "course management",
    "scoreboard",
    "gpa",
    "school year",
    "semester",
    "csv",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coursedesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
