"""
Statement builder interface consumed by dialect pagination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol

from .errors import MalformedInputError

if TYPE_CHECKING:
    from .dialects.base import BaseDialect


class SqlBuilder(Protocol):
    """
    Mutable accumulator of clause text that a dialect's ``page`` appends to.
    """

    dialect: "BaseDialect"

    @property
    def has_order(self) -> bool: ...

    def trail(self, segment: str) -> None: ...

    def insert_selector(self, segment: str) -> None: ...

    def order_by(self, column: str) -> "SqlBuilder": ...


class StatementBuilder:
    """
    Minimal SELECT builder delegating every backend-variable fragment to its dialect.

    Select and order-by lists are kept as token lists so the dialect's
    distinct/order-by reconciliation can work on them directly. Column text is
    used as given; quote it with ``dialect.quote_for_column_name`` first.
    """

    def __init__(self, table_prefix: str, dialect: "BaseDialect") -> None:
        self.table_prefix = table_prefix
        self.dialect = dialect
        self._select: List[str] = []
        self._selector: List[str] = []
        self._from: Optional[str] = None
        self._where: List[str] = []
        self._order: List[str] = []
        self._trail: List[str] = []
        self._distinct = False
        self._offset: Optional[str] = None
        self._limit: Optional[str] = None

    # Clause setters ----------------------------------------------------
    def select(self, *columns: str) -> "StatementBuilder":
        for column in columns:
            if self._select:
                self._select.append(",")
            self._select.append(column)
        return self

    def table(self, name: str) -> "StatementBuilder":
        if not name:
            raise MalformedInputError("Table name must not be empty.")
        self._from = self.dialect.quote_for_table_name(f"{self.table_prefix}{name}")
        return self

    def where(self, condition: str) -> "StatementBuilder":
        self._where.append(condition)
        return self

    def order_by(self, column: str) -> "StatementBuilder":
        if self._order:
            self._order.append(",")
        self._order.append(column)
        return self

    def order_by_descending(self, column: str) -> "StatementBuilder":
        self.order_by(column)
        self._order.append(" DESC")
        return self

    def distinct(self) -> "StatementBuilder":
        self._distinct = True
        return self

    def skip(self, offset: str) -> "StatementBuilder":
        self._offset = offset
        return self

    def take(self, limit: str) -> "StatementBuilder":
        self._limit = limit
        return self

    # Mutation contract used by dialects --------------------------------
    def trail(self, segment: str) -> None:
        self._trail.append(segment)

    def insert_selector(self, segment: str) -> None:
        self._selector.append(segment)

    @property
    def has_order(self) -> bool:
        return bool(self._order)

    @property
    def has_paging(self) -> bool:
        return self._offset is not None or self._limit is not None

    @property
    def select_segments(self) -> List[str]:
        return self._select

    @property
    def order_segments(self) -> List[str]:
        return self._order

    # Rendering ---------------------------------------------------------
    def to_sql(self) -> str:
        statement = self._clone()
        if statement._distinct and statement._order:
            statement.dialect.distinct_order_by_select(statement._select, statement._order)
        if statement.has_paging:
            statement.dialect.page(statement, statement._offset, statement._limit)
        return statement._render()

    def _render(self) -> str:
        if self._from is None:
            raise MalformedInputError("A table is required before rendering a statement.")

        parts: List[str] = ["SELECT"]
        if self._distinct:
            parts.append("DISTINCT")
        selector = "".join(self._selector).strip()
        if selector:
            parts.append(selector)
        columns = [segment for segment in self._select if segment.strip() != ","]
        parts.append(", ".join(columns) if columns else "*")
        parts.append(f"FROM {self._from}")
        if self._where:
            parts.append("WHERE " + " AND ".join(self._where))
        if self._order:
            parts.append("ORDER BY " + "".join(self._render_order()))
        return " ".join(parts) + "".join(self._trail)

    def _render_order(self) -> List[str]:
        return [", " if segment.strip() == "," else segment for segment in self._order]

    def _clone(self) -> "StatementBuilder":
        clone = StatementBuilder(self.table_prefix, self.dialect)
        clone._select = list(self._select)
        clone._selector = list(self._selector)
        clone._from = self._from
        clone._where = list(self._where)
        clone._order = list(self._order)
        clone._trail = list(self._trail)
        clone._distinct = self._distinct
        clone._offset = self._offset
        clone._limit = self._limit
        return clone
