"""Extraction of action signatures from workflow definitions, and type mapping."""

from .activity_extractor import decode_activity
from .type_mapper import map_to_python_type

__all__ = [
    "decode_activity",
    "map_to_python_type",
]
