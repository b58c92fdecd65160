"""
Utility modules for adaptor metadata.
"""

from adaptor_metadata.utils.adaptor_name import UNKNOWN_ADAPTOR, extract_adaptor_name
from adaptor_metadata.utils.tree_sort import normalize_metadata, sort_deep

__all__ = ["UNKNOWN_ADAPTOR", "extract_adaptor_name", "normalize_metadata", "sort_deep"]
