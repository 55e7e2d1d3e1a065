[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kata"
version = "0.1.0"
description = "Worked solutions to classic programming exercises: list operations, change making, longest increasing subsequences, shortest paths, generic containers, caches and a circuit breaker."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "algorithms",
    "data-structures",
    "dynamic-programming",
    "graphs",
    "shortest-path",
    "cache",
    "circuit-breaker",
]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kata-circuit = "kata.circuit:main"

[tool.hatch.build.targets.wheel]
packages = ["kata"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
