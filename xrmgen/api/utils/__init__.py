"""Utility functions for code generation."""

from .formatters import format_python_code
from .naming import to_identifier, to_member_names

__all__ = [
    "format_python_code",
    "to_identifier",
    "to_member_names",
]
