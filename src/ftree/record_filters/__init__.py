"""Filters and ordering applied to scanned file records."""

from .base_filter import BaseRecordFilter
from .composite_filter import CompositeRecordFilter
from .recency_filter import RecencyFilter
from .size_filters import MaxSizeFilter, MinSizeFilter
from .sorting import build_filters, filter_and_sort, filter_records, sort_records
from .type_filter import TypeRecordFilter

__all__ = [
    "BaseRecordFilter",
    "CompositeRecordFilter",
    "MaxSizeFilter",
    "MinSizeFilter",
    "RecencyFilter",
    "TypeRecordFilter",
    "build_filters",
    "filter_and_sort",
    "filter_records",
    "sort_records",
]
