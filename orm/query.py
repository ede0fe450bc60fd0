"""Model-agnostic filtered, sorted, page-windowed reads.

Filters are plain dicts so callers never build SQL themselves::

    {"customer_id": 7}                                  # equality
    {"date": {"gte": monday, "lte": sunday}}            # range
    {"status": {"in": ["active", "pending"]}}           # membership

Sort keys are attribute names; a leading ``-`` sorts descending.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

from flask import current_app, has_app_context
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError

from models import db
from utils.errors import StorageError, ValidationError

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "eq": operator.eq,
    "ne": operator.ne,
    "gt": operator.gt,
    "gte": operator.ge,
    "lt": operator.lt,
    "lte": operator.le,
    "in": lambda column, value: column.in_(list(value)),
}


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of a query result. ``total`` counts every match."""

    items: list[T] = field(default_factory=list)
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    total: int = 0

    @property
    def pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total / self.page_size)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            items=[fn(item) for item in self.items],
            page=self.page,
            page_size=self.page_size,
            total=self.total,
        )


def default_page_size() -> int:
    """The configured ``DEFAULT_PAGE_SIZE``, or the module default outside an app."""

    if has_app_context():
        return int(current_app.config.get("DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE))
    return DEFAULT_PAGE_SIZE


def normalize_window(page=None, page_size=None) -> tuple[int, int]:
    """Clamp ``page`` to >= 1 and ``page_size`` to [1, MAX_PAGE_SIZE]."""

    try:
        page = DEFAULT_PAGE if page is None else int(page)
        page_size = default_page_size() if page_size is None else int(page_size)
    except (TypeError, ValueError):
        raise ValidationError("page and pageSize must be integers.") from None
    page = max(page, 1)
    page_size = min(max(page_size, 1), MAX_PAGE_SIZE)
    return page, page_size


class QueryEngine:
    """Runs filtered queries against whichever session it is given."""

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    # -- clause building -------------------------------------------------

    @staticmethod
    def _column(model, name: str):
        mapper = inspect(model)
        if name not in mapper.column_attrs:
            raise ValidationError(
                f"Unknown field for {model.__name__}: {name}.", field=name
            )
        return getattr(model, name)

    def build_clauses(self, model, filters: Mapping[str, Any] | None) -> list:
        clauses = []
        for name, condition in (filters or {}).items():
            column = self._column(model, name)
            if isinstance(condition, Mapping):
                for op, value in condition.items():
                    try:
                        clauses.append(OPERATORS[op](column, value))
                    except KeyError:
                        raise ValidationError(
                            f"Unsupported filter operator: {op}.", field=name
                        ) from None
            elif condition is None:
                clauses.append(column.is_(None))
            else:
                clauses.append(column == condition)
        return clauses

    def build_order(self, model, sort: str | Iterable[str] | None) -> list:
        if not sort:
            keys: list[str] = []
        elif isinstance(sort, str):
            keys = [sort]
        else:
            keys = list(sort)

        order = []
        seen = set()
        for key in keys:
            descending = key.startswith("-")
            name = key.lstrip("-+")
            column = self._column(model, name)
            order.append(column.desc() if descending else column.asc())
            seen.add(name)

        # Primary key as the final tiebreaker keeps page windows stable.
        for pk in inspect(model).primary_key:
            if pk.key not in seen:
                order.append(getattr(model, pk.key).asc())
        return order

    # -- execution -------------------------------------------------------

    def _execute(self, stmt):
        try:
            return self.session.execute(stmt)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(str(exc)) from exc

    def count(self, model, filters: Mapping[str, Any] | None = None) -> int:
        stmt = select(func.count()).select_from(model).where(
            *self.build_clauses(model, filters)
        )
        return int(self._execute(stmt).scalar_one())

    def all(self, model, filters=None, sort=None) -> list:
        stmt = (
            select(model)
            .where(*self.build_clauses(model, filters))
            .order_by(*self.build_order(model, sort))
        )
        return list(self._execute(stmt).scalars().all())

    def first(self, model, filters=None, sort=None):
        stmt = (
            select(model)
            .where(*self.build_clauses(model, filters))
            .order_by(*self.build_order(model, sort))
            .limit(1)
        )
        return self._execute(stmt).scalars().first()

    def paginate(
        self, model, filters=None, sort=None, page=None, page_size=None
    ) -> Page:
        """Return one page of matches plus the full match count."""

        page, page_size = normalize_window(page, page_size)
        clauses = self.build_clauses(model, filters)
        skip = (page - 1) * page_size

        total = self.count(model, filters)
        stmt = (
            select(model)
            .where(*clauses)
            .order_by(*self.build_order(model, sort))
            .offset(skip)
            .limit(page_size)
        )
        items = list(self._execute(stmt).scalars().all())
        return Page(items=items, page=page, page_size=page_size, total=total)


def api_response(
    page: Page, message: str = "retrieved successfully", code: int = 200
) -> dict:
    """Envelope used by every paginated list endpoint."""

    return {
        "message": message,
        "code": code,
        "data": list(page.items),
        "page": page.page,
        "pageSize": page.page_size,
        "total": page.total,
    }
