"""Search-index mapping helpers."""

from .flatten import get_flattened_mapping_properties, get_flattened_mapping_properties_by_type

__all__ = [
    "get_flattened_mapping_properties",
    "get_flattened_mapping_properties_by_type",
]
