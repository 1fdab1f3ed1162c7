"""Domain models for the CSV -> nested JSON converter.

This package contains the domain model classes used throughout the application:
configuration, source rows, the nested value tree types and run results.
"""

from .config_models import DEFAULT_METADATA, ConvertConfig
from .conversion_result import ConversionResult
from .error_record import ErrorRecord
from .nested import NestedValue, PathSegment, Record, Scalar
from .row_data import CsvTable, RowData

__all__ = [
    # Configuration models
    "ConvertConfig",
    "DEFAULT_METADATA",
    # Processing models
    "CsvTable",
    "RowData",
    "ConversionResult",
    "ErrorRecord",
    # Value tree
    "NestedValue",
    "PathSegment",
    "Record",
    "Scalar",
]
