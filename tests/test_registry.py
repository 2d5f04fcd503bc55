"""
Tests for the Column Type Registry and the default catalog.

Covers:
- Registration and retrieval
- Duplicate rejection and freezing
- Unknown names (lookup returns None)
- Default catalog contents and geometry flags
- register_column_type() plugin point
"""

import pytest

from geoschema.column_types import (
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
from geoschema.types import REGISTRY, default_registry, register_column_type


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def reg():
    """Fresh, empty registry for each test."""
    return ColumnTypeRegistry()


@pytest.fixture
def defaults():
    """Fresh registry populated with the default catalog."""
    return default_registry()


GEOMETRY_NAMES = {
    "geometry", "validated_geometry", "geometry_noindex", "point", "linestring",
}

SCALAR_NAMES = {
    "string", "bool", "int8", "int32", "int64", "float32", "hstore_string",
    "hstore", "json_string", "jsonb_string", "date", "time", "timestamp",
    "char1",
}


# ===========================================================================
# A. Registration
# ===========================================================================

class TestRegister:

    def test_register_and_get(self, reg):
        col_type = SimpleColumnType("TEXT")
        reg.register("text", col_type)
        assert reg.get("text") is col_type

    def test_register_returns_column_type(self, reg):
        col_type = GeometryType("POLYGON")
        assert reg.register("polygon", col_type) is col_type

    def test_register_duplicate_raises(self, reg):
        reg.register("x", SimpleColumnType("TEXT"))
        with pytest.raises(DuplicateColumnTypeError, match="already registered"):
            reg.register("x", SimpleColumnType("VARCHAR"))

    def test_duplicate_keeps_original(self, reg):
        original = SimpleColumnType("TEXT")
        reg.register("x", original)
        with pytest.raises(RegistryError):
            reg.register("x", GeometryType("GEOMETRY"))
        assert reg.get("x") is original

    def test_duplicate_is_registry_error(self):
        assert issubclass(DuplicateColumnTypeError, RegistryError)
        assert issubclass(RegistryFrozenError, RegistryError)

    def test_init_with_mapping(self):
        r = ColumnTypeRegistry({"a": SimpleColumnType("INT"),
                                "b": GeometryType("POINT")})
        assert len(r) == 2
        assert r.names() == ["a", "b"]


# ===========================================================================
# B. Freezing
# ===========================================================================

class TestFreeze:

    def test_not_frozen_by_default(self, reg):
        assert not reg.frozen

    def test_register_after_freeze_raises(self, reg):
        reg.register("a", SimpleColumnType("INT"))
        reg.freeze()
        assert reg.frozen
        with pytest.raises(RegistryFrozenError, match="frozen"):
            reg.register("b", SimpleColumnType("INT"))
        assert "b" not in reg

    def test_lookup_after_freeze(self, reg):
        col_type = SimpleColumnType("INT")
        reg.register("a", col_type)
        reg.freeze()
        assert reg.get("a") is col_type


# ===========================================================================
# C. Lookup
# ===========================================================================

class TestLookup:

    def test_get_missing_returns_none(self, reg):
        assert reg.get("nonexistent") is None

    def test_contains(self, defaults):
        assert "point" in defaults
        assert "polygon" not in defaults

    def test_iter_and_len(self, defaults):
        assert set(defaults) == GEOMETRY_NAMES | SCALAR_NAMES
        assert len(defaults) == len(GEOMETRY_NAMES | SCALAR_NAMES)

    def test_all_types_is_copy(self, defaults):
        types = defaults.all_types()
        types.pop("point")
        assert "point" in defaults

    def test_geometry_types(self, defaults):
        assert set(defaults.geometry_types()) == GEOMETRY_NAMES


# ===========================================================================
# D. Default catalog
# ===========================================================================

class TestDefaultCatalog:

    @pytest.mark.parametrize("name", sorted(GEOMETRY_NAMES))
    def test_geometry_names_are_geometry(self, defaults, name):
        assert defaults.get(name).is_geometry()

    @pytest.mark.parametrize("name", sorted(SCALAR_NAMES))
    def test_scalar_names_are_not_geometry(self, defaults, name):
        assert not defaults.get(name).is_geometry()

    @pytest.mark.parametrize("name,sql_name", [
        ("string", "VARCHAR"),
        ("bool", "BOOL"),
        ("int8", "SMALLINT"),
        ("int32", "INT"),
        ("int64", "BIGINT"),
        ("float32", "REAL"),
        ("hstore_string", "HSTORE"),
        ("json_string", "JSON"),
        ("jsonb_string", "JSONB"),
        ("date", "DATE"),
        ("time", "TIME"),
        ("timestamp", "TIMESTAMP"),
        ("char1", '"char"'),
        ("geometry", "GEOMETRY"),
        ("validated_geometry", "GEOMETRY"),
        ("geometry_noindex", "GEOMETRYNOINDEX"),
        ("point", "POINT"),
        ("linestring", "LINESTRING"),
    ])
    def test_sql_names(self, defaults, name, sql_name):
        assert defaults.get(name).name == sql_name

    def test_variants(self, defaults):
        assert type(defaults.get("hstore")) is HstoreColumnType
        assert type(defaults.get("hstore_string")) is SimpleColumnType
        assert type(defaults.get("validated_geometry")) is ValidatedGeometryType
        assert type(defaults.get("point")) is GeometryType

    def test_default_registry_is_fresh(self):
        a = default_registry()
        b = default_registry()
        a.register("custom", SimpleColumnType("TEXT"))
        assert "custom" not in b

    def test_module_registry_has_defaults(self):
        for name in GEOMETRY_NAMES | SCALAR_NAMES:
            assert name in REGISTRY


# ===========================================================================
# E. register_column_type()
# ===========================================================================

class TestRegisterColumnType:

    def test_register_new_name(self, defaults):
        col_type = SimpleColumnType("NUMERIC")
        register_column_type("numeric", col_type, registry=defaults)
        assert defaults.get("numeric") is col_type

    def test_register_existing_name_raises(self, defaults):
        with pytest.raises(DuplicateColumnTypeError, match="'point'"):
            register_column_type("point", GeometryType("POINT"),
                                 registry=defaults)

    def test_register_into_default_registry_rejects_duplicate(self):
        with pytest.raises(DuplicateColumnTypeError):
            register_column_type("geometry", GeometryType("GEOMETRY"))
