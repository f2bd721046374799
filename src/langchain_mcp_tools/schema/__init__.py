"""Tool input schema compilation."""

from .compiler import JsonSchema, compile_input_schema

__all__ = [
    "JsonSchema",
    "compile_input_schema",
]
