[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soltrade"
version = "0.2.3"
description = "Pricing, configuration and lookup-table helpers for trading tokens on Solana DEX programs."
requires-python = ">=3.10"
dependencies = []
keywords = ["solana", "pumpfun", "pumpswap", "raydium", "bonding-curve", "trading"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
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
packages = ["soltrade"]

[tool.pytest.ini_options]
addopts = "-ra"
