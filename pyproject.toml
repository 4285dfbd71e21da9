[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lium"
version = "0.1.0"
description = "Models, filtering, Pareto selection and SSH/Docker helpers for rented GPU compute executors and pods"
requires-python = ">=3.10"
dependencies = []
keywords = ["gpu", "compute", "pods", "executors", "ssh", "rsync", "docker", "pareto"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lium"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
