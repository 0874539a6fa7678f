[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakata"
version = "0.1.0"
description = "Worked solutions to classic data-structure and algorithm exercises, with a small check-runner harness"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "interview", "practice", "kata"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakata = "dsakata.harness:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakata"]

[tool.pytest.ini_options]
addopts = "-ra"
