[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbasics"
version = "0.1.0"
description = "Small, readable implementations of classic data structures and stack algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "queue", "deque", "stack", "rpn"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
dsbasics = "dsbasics.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
