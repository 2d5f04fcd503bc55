"""
Table, column and generalized-table specs, and the SQL built from them.

These are the shapes the mapping loader hands over. They only render
statements; executing them is up to the caller.
"""

import logging
from dataclasses import dataclass, field

from geoschema.column_types import ColumnType, quote_ident

logger = logging.getLogger(__name__)


@dataclass
class ColumnSpec:
    """A single column: its identifier and resolved ColumnType."""
    name: str
    type: ColumnType
    type_name: str = ""   # semantic type name from the mapping, if known


@dataclass
class TableSpec:
    """An import table. geometry_type is the mapping's kind, e.g. "polygon"."""
    name: str
    schema: str = "public"
    columns: list = field(default_factory=list)
    geometry_type: str = ""

    @property
    def full_name(self) -> str:
        return f"{quote_ident(self.schema)}.{quote_ident(self.name)}"

    def geometry_columns(self) -> list:
        return [col for col in self.columns if col.type.is_geometry()]

    def insert_sql(self) -> str:
        """Parameterized INSERT with one $n placeholder per column."""
        names = ", ".join(quote_ident(col.name) for col in self.columns)
        values = ", ".join(
            col.type.prepare_insert_sql(i, self)
            for i, col in enumerate(self.columns, start=1)
        )
        return f"INSERT INTO {self.full_name} ({names}) VALUES ({values})"


@dataclass
class GeneralizedTableSpec:
    """A simplified copy of *source*, built with the given tolerance."""
    name: str
    source: TableSpec
    tolerance: float
    schema: str = "public"
    where: str = ""

    @property
    def full_name(self) -> str:
        return f"{quote_ident(self.schema)}.{quote_ident(self.name)}"

    def generalize(self) -> tuple:
        """Return (select-list expressions, diagnostics) for every column.

        Pure; select_sql() is the logging counterpart.
        """
        expressions = []
        diagnostics = []
        for col in self.source.columns:
            result = col.type.generalize(col, self)
            expressions.append(result.sql)
            if result.diagnostic is not None:
                diagnostics.append(result.diagnostic)
        return expressions, diagnostics

    def select_sql(self) -> str:
        expressions, diagnostics = self.generalize()
        for diagnostic in diagnostics:
            logger.warning(diagnostic.message)

        sql = f"SELECT {', '.join(expressions)} FROM {self.source.full_name}"
        if self.where:
            sql += f" WHERE {self.where}"
        return sql

    def create_sql(self) -> str:
        return f"CREATE TABLE {self.full_name} AS ({self.select_sql()})"
