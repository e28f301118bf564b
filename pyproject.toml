[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protolinter"
version = "0.1.0"
description = "Lint rules, configuration and reporters for Protocol Buffer syntax trees."
requires-python = ">=3.10"
keywords = ["protobuf", "protocol-buffers", "lint", "linter", "style"]
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
    "Topic :: Software Development :: Quality Assurance",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
protolinter = "protolinter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["protolinter"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
