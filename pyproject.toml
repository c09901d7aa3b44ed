[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icanative"
version = "0.1.0"
description = "Client state model for an Icalingua-style chat client: chat groups, online status, notification and chat display options."
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "icalingua", "client", "state"]
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
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["icanative"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
