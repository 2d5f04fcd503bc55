"""
Column type catalog — the well-known semantic type names.

Exports REGISTRY, the default ColumnTypeRegistry populated with the
scalar and geometry types, and register_column_type() for plugins that
add their own names during startup.
"""

from geoschema.column_types import ColumnType
from geoschema.registry import ColumnTypeRegistry
from geoschema.types.geometry import GEOMETRY_TYPES
from geoschema.types.scalar import SCALAR_TYPES


def default_registry() -> ColumnTypeRegistry:
    """Build a fresh registry holding every well-known column type."""
    registry = ColumnTypeRegistry()
    for catalog in (SCALAR_TYPES, GEOMETRY_TYPES):
        for name, column_type in catalog.items():
            registry.register(name, column_type)
    return registry


REGISTRY = default_registry()


def register_column_type(name: str, column_type: ColumnType,
                         registry: ColumnTypeRegistry = REGISTRY) -> ColumnType:
    """Add a custom column type. Duplicate names raise DuplicateColumnTypeError."""
    return registry.register(name, column_type)
