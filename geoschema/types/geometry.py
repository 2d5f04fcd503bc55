"""
Geometry column types — bound as $n::Geometry, simplified on generalize.
"""

from geoschema.column_types import GeometryType, ValidatedGeometryType

GEOMETRY_TYPES = {
    "geometry": GeometryType("GEOMETRY"),
    "validated_geometry": ValidatedGeometryType("GEOMETRY"),
    "geometry_noindex": GeometryType("GEOMETRYNOINDEX"),
    "point": GeometryType("POINT"),
    "linestring": GeometryType("LINESTRING"),
}
