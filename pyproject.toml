[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schwab_market"
version = "0.0.3"
description = "Typed models for decoding and encoding Schwab market data API responses"
requires-python = ">=3.10"
dependencies = []
keywords = ["schwab", "market data", "quotes", "option chain", "json"]
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
    "Topic :: Office/Business :: Financial :: Investment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["schwab_market"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
