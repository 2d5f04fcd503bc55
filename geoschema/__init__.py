"""
PostGIS column types: INSERT placeholders and generalized-table SQL.
"""

from geoschema.column_types import (
    ColumnType,
    Diagnostic,
    GeneralizeResult,
    GeometryType,
    HstoreColumnType,
    SimpleColumnType,
    ValidatedGeometryType,
)
from geoschema.registry import (
    ColumnTypeRegistry,
    DuplicateColumnTypeError,
    RegistryError,
    RegistryFrozenError,
)
from geoschema.specs import ColumnSpec, GeneralizedTableSpec, TableSpec
from geoschema.types import REGISTRY, default_registry, register_column_type

__all__ = [
    "ColumnType", "Diagnostic", "GeneralizeResult", "GeometryType",
    "HstoreColumnType", "SimpleColumnType", "ValidatedGeometryType",
    "ColumnTypeRegistry", "DuplicateColumnTypeError", "RegistryError",
    "RegistryFrozenError", "ColumnSpec", "GeneralizedTableSpec", "TableSpec",
    "REGISTRY", "default_registry", "register_column_type",
]
