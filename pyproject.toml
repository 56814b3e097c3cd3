[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "controlled_mint"
version = "0.1.0"
description = "Owner-controlled mintable token contract model with a compact binary schema codec"
requires-python = ">=3.10"
dependencies = []
keywords = ["token", "mint", "contract", "alkanes", "borsh"]
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
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["controlled_mint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
