[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practools"
version = "0.1.0"
description = "Small command-line tools and exercise solutions: a recursive grep, an HTTP client, log-forwarding building blocks with a live browser view, and fare and price calculators."
requires-python = ">=3.10"
keywords = ["grep", "http", "curl", "logs", "websocket", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "requests",
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
    "pytest-asyncio",
]

[project.scripts]
practools-cgrep = "practools.cgrep.cli:main"
practools-curl = "practools.curl.cli:main"
practools-log-browser = "practools.logtransfer.browser:main"

[tool.hatch.build.targets.wheel]
packages = ["practools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
