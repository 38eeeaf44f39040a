[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "siphttp"
version = "0.1.0"
description = "A small command-line HTTP/1.1 client with its own request and response parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "cli", "http-file", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sip = "siphttp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["siphttp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
