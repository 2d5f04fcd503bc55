"""
Column Type Registry — semantic type name → ColumnType catalog.

Every semantic type name used in a mapping must be registered here before
table specs can reference it. The registry is an explicit value handed to
whatever translates the schema; geoschema.types builds the default one.

Registration happens during startup. There is no locking: finish every
register() call (and optionally freeze()) before sharing the registry
across worker threads. After that all access is read-only.
"""

from typing import Optional

from geoschema.column_types import ColumnType


class RegistryError(Exception):
    """Raised when the column type catalog is misconfigured."""


class DuplicateColumnTypeError(RegistryError):
    """Raised when a semantic type name is registered twice."""


class RegistryFrozenError(RegistryError):
    """Raised when registering into a frozen registry."""


class ColumnTypeRegistry:
    """
    Mapping from semantic type name to a shared ColumnType instance.

    Names are unique. Overwriting an existing name would silently change
    the SQL generated for every table using it, so register() refuses.
    Unknown names are not an error here: get() returns None and the caller
    reports the problem with its own context (mapping file, table, column).
    """

    def __init__(self, types: Optional[dict] = None):
        self._types: dict[str, ColumnType] = {}
        self._frozen = False
        for name, column_type in (types or {}).items():
            self.register(name, column_type)

    # ── Registration ──────────────────────────────────────────────

    def register(self, name: str, column_type: ColumnType) -> ColumnType:
        """Register *column_type* under the semantic type *name*.

        Raises DuplicateColumnTypeError if *name* is already registered and
        RegistryFrozenError after freeze(). Both are configuration errors
        and should abort startup.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register column type '{name}': registry is frozen"
            )
        if name in self._types:
            raise DuplicateColumnTypeError(
                f"Column type '{name}' is already registered "
                f"(as {self._types[name]!r})"
            )
        self._types[name] = column_type
        return column_type

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Lookup ────────────────────────────────────────────────────

    def get(self, name: str) -> Optional[ColumnType]:
        """Return the ColumnType registered as *name*, or None."""
        return self._types.get(name)

    def __contains__(self, name) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self):
        return iter(self._types)

    # ── Introspection ─────────────────────────────────────────────

    def names(self) -> list:
        """Return all registered names in registration order."""
        return list(self._types)

    def all_types(self) -> dict:
        """Return a copy of the name → ColumnType mapping."""
        return dict(self._types)

    def geometry_types(self) -> dict:
        """Return the entries whose ColumnType is a geometry type."""
        return {
            name: column_type
            for name, column_type in self._types.items()
            if column_type.is_geometry()
        }
