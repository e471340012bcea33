[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Small, well-tested building blocks: an employee registry, longest increasing subsequences, shortest paths, generic collections and rate limiting."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "longest-increasing-subsequence",
    "graphs",
    "shortest-path",
    "dijkstra",
    "bellman-ford",
    "collections",
    "rate-limiter",
    "token-bucket",
    "wsgi",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
