[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskdesk"
version = "0.1.0"
description = "A small terminal task manager with due dates, tags and priorities, stored in CSV"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "terminal", "csv", "scheduling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskdesk = "taskdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["taskdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
