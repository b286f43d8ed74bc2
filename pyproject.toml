[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zyst"
version = "1.0.3"
description = "A small Redis-compatible key-value server with append-only persistence"
requires-python = ">=3.11"
dependencies = [
    "platformdirs",
]
keywords = [
    "redis",
    "database",
    "key-value-store",
    "server",
    "async",
    "networking",
    "caching",
    "nosql",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: No Input/Output (Daemon)",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
zyst = "zyst.main:main"

[tool.hatch.build.targets.wheel]
packages = ["zyst"]

[tool.hatch.build.targets.sdist]
include = [
    "zyst",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
