"""
Scalar column types — strings, numbers, json, dates and hstore.

Values are bound with a bare $n placeholder (hstore adds a cast) and
copied unchanged into generalized tables.
"""

from geoschema.column_types import HstoreColumnType, SimpleColumnType

SCALAR_TYPES = {
    # ── Text / numbers ───────────────────────────────────────────
    "string": SimpleColumnType("VARCHAR"),
    "bool": SimpleColumnType("BOOL"),
    "int8": SimpleColumnType("SMALLINT"),
    "int32": SimpleColumnType("INT"),
    "int64": SimpleColumnType("BIGINT"),
    "float32": SimpleColumnType("REAL"),

    # ── Key-value / documents ────────────────────────────────────
    "hstore_string": SimpleColumnType("HSTORE"),
    "hstore": HstoreColumnType("HSTORE"),
    "json_string": SimpleColumnType("JSON"),    # PostgreSQL >= 9.2
    "jsonb_string": SimpleColumnType("JSONB"),  # PostgreSQL >= 9.4

    # ── Time ─────────────────────────────────────────────────────
    "date": SimpleColumnType("DATE"),
    "time": SimpleColumnType("TIME"),
    "timestamp": SimpleColumnType("TIMESTAMP"),

    # PostgreSQL single-byte internal type
    "char1": SimpleColumnType('"char"'),
}
