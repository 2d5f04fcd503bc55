"""
ColumnType ABC and the closed set of PostGIS column type variants.

A ColumnType knows two things about a column:
- how to bind a value in a parameterized INSERT ($n placeholders), and
- how to select it when building a generalized (simplified) table.

Variants share behaviour by subclassing and delegate to the parent
explicitly where they only add to it (hstore adds a cast to the plain
placeholder). Instances are frozen and shared by every table spec.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from geoschema.specs import ColumnSpec, GeneralizedTableSpec, TableSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem noticed while rendering SQL."""
    table: str
    message: str


@dataclass(frozen=True)
class GeneralizeResult:
    """Select-list expression for a generalized table, plus any diagnostic.

    The sql never depends on whether a diagnostic is present.
    """
    sql: str
    diagnostic: Optional[Diagnostic] = None


def quote_ident(name: str) -> str:
    """Double-quote an identifier. Embedded quotes are not escaped."""
    return f'"{name}"'


class ColumnType(ABC):
    """Shared contract of every column type variant.

    Implementations must provide ``name`` (the SQL type literal used in
    DDL), is_geometry(), prepare_insert_sql() and generalize().
    """

    name: str

    @abstractmethod
    def is_geometry(self) -> bool:
        """True for spatial columns (simplification and indexing apply)."""

    @abstractmethod
    def prepare_insert_sql(self, i: int, spec: "TableSpec") -> str:
        """Placeholder for the *i*-th (1-based) bound INSERT parameter."""

    @abstractmethod
    def generalize(self, col_spec: "ColumnSpec",
                   spec: "GeneralizedTableSpec") -> GeneralizeResult:
        """Render the select-list expression for a generalized table.

        Pure: diagnostics are returned, not logged.
        """

    def generalize_sql(self, col_spec: "ColumnSpec",
                       spec: "GeneralizedTableSpec") -> str:
        """Render the select-list expression, logging any diagnostic."""
        result = self.generalize(col_spec, spec)
        if result.diagnostic is not None:
            logger.warning(result.diagnostic.message)
        return result.sql


# ── Scalars ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class SimpleColumnType(ColumnType):
    """Plain scalar column: bare placeholder, column copied unchanged."""
    name: str

    def is_geometry(self) -> bool:
        return False

    def prepare_insert_sql(self, i: int, spec: "TableSpec") -> str:
        return f"${i}"

    def generalize(self, col_spec, spec) -> GeneralizeResult:
        return GeneralizeResult(quote_ident(col_spec.name))


@dataclass(frozen=True)
class HstoreColumnType(SimpleColumnType):
    """Key-value map column; the bound value is cast to hstore."""

    def prepare_insert_sql(self, i: int, spec: "TableSpec") -> str:
        return super().prepare_insert_sql(i, spec) + "::hstore"


# ── Geometries ───────────────────────────────────────────────────


@dataclass(frozen=True)
class GeometryType(ColumnType):
    """Spatial column, simplified with ST_SimplifyPreserveTopology."""
    name: str

    def is_geometry(self) -> bool:
        return True

    def prepare_insert_sql(self, i: int, spec: "TableSpec") -> str:
        return f"${i}::Geometry"

    def simplify_sql(self, col_spec, spec) -> str:
        return (f"ST_SimplifyPreserveTopology("
                f"{quote_ident(col_spec.name)}, {spec.tolerance:f})")

    def generalize(self, col_spec, spec) -> GeneralizeResult:
        return GeneralizeResult(
            f"{self.simplify_sql(col_spec, spec)} as {quote_ident(col_spec.name)}"
        )


@dataclass(frozen=True)
class ValidatedGeometryType(GeometryType):
    """Geometry whose simplified form is repaired with ST_Buffer(..., 0).

    The zero buffer always produces polygons, so using this type on a
    non-polygon source table yields a diagnostic. The check happens here,
    at generation time, and never changes the SQL.
    """

    def generalize(self, col_spec, spec) -> GeneralizeResult:
        diagnostic = None
        # TODO: report the polygon mismatch when the mapping is validated
        if spec.source.geometry_type != "polygon":
            diagnostic = Diagnostic(
                table=spec.full_name,
                message=(f"validated_geometry column returns polygon "
                         f"geometries for {spec.full_name}"),
            )
        return GeneralizeResult(
            f"ST_Buffer({self.simplify_sql(col_spec, spec)}, 0) "
            f"as {quote_ident(col_spec.name)}",
            diagnostic,
        )
