"""Data types and JSON serialisation for the Model Context Protocol."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "protocol",
    "logging_types",
    "tools",
    "resources",
    "prompts",
    "sampling",
]