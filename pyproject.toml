[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hivemimic"
version = "1.0.0"
description = "A simulated Hive blockchain node's JSON-RPC API for end-to-end testing."
requires-python = ">=3.10"
keywords = ["hive", "blockchain", "json-rpc", "mock", "simulation", "testing"]
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
    "Topic :: Software Development :: Testing :: Mocking",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hivemimic = "hivemimic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hivemimic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
