"""Utility functions for tumblget."""

from tumblget.utils.numbers import saturated_add
from tumblget.utils.sorting import (
    SortDescription,
    SortDirection,
    StableComparer,
    natural_compare,
    natural_sort_key,
)

__all__ = [
    "saturated_add",
    "SortDescription",
    "SortDirection",
    "StableComparer",
    "natural_compare",
    "natural_sort_key",
]
