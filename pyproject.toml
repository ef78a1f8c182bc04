[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcp_types"
version = "0.1.0"
description = "Shared types and protocol definitions for the Model Context Protocol (MCP)"
requires-python = ">=3.10"
dependencies = []
keywords = ["mcp", "ai", "llm", "protocol", "types", "json-rpc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcp_types"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
