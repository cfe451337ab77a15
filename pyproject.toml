[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwtokens"
version = "0.1.0"
description = "Multi-token ledger contract and atomic swap state over an in-memory ordered key-value store"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokens", "multi-token", "atomic-swap", "ledger", "smart-contracts"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cwtokens"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
