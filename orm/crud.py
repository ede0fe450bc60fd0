"""Generic create/read/update/delete over one model."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models import db
from utils.dates import utcnow
from utils.errors import (
    AppError,
    InvalidId,
    NotFound,
    StorageError,
    ValidationError,
)

from .query import Page, QueryEngine
from .schemas import Schema, validate


def parse_id(raw: Any) -> int:
    """Return the integer primary key for ``raw`` or raise ``InvalidId``."""

    if isinstance(raw, bool):
        raise InvalidId()
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        value = int(raw.strip())
    else:
        raise InvalidId()
    if value <= 0:
        raise InvalidId()
    return value


class CrudResource:
    """Uniform CRUD for ``model``, validated by pydantic schemas.

    ``resource_name`` is used for not-found messages and as the response key
    (``plural_name`` for lists). ``conflict_error`` is raised when the store
    rejects a write on a uniqueness constraint.
    """

    def __init__(
        self,
        model,
        create_schema: type[Schema],
        update_schema: type[Schema],
        resource_name: str,
        plural_name: str | None = None,
        *,
        default_sort=None,
        session=None,
        conflict_error: type[AppError] | None = None,
    ):
        self.model = model
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.resource_name = resource_name
        self.plural_name = plural_name or f"{resource_name}s"
        self.default_sort = default_sort
        self.conflict_error = conflict_error
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    @property
    def query(self) -> QueryEngine:
        return QueryEngine(self.session)

    def not_found(self) -> NotFound:
        return NotFound.for_resource(self.resource_name)

    # -- hooks -----------------------------------------------------------

    def build(self, values: Mapping[str, Any]):
        """Create an unsaved instance from validated values."""

        instance = self.model()
        self.apply(instance, values)
        instance.created_at = utcnow()
        return instance

    def apply(self, instance, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            setattr(instance, key, value)

    # -- storage ---------------------------------------------------------

    def commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if self.conflict_error is not None:
                raise self.conflict_error() from exc
            raise StorageError(str(exc)) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(str(exc)) from exc

    def _load(self, pk: int):
        try:
            return self.session.get(self.model, pk)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(str(exc)) from exc

    def _reject_nulls(self, values: Mapping[str, Any]) -> None:
        columns = self.model.__table__.columns
        for key, value in values.items():
            column = columns.get(key)
            if value is None and column is not None and not column.nullable:
                field = to_camel(key)
                raise ValidationError(f"{field}: must not be null", field=field)

    # -- operations ------------------------------------------------------

    def create(
        self,
        data: Mapping[str, Any] | None,
        *,
        schema: type[Schema] | None = None,
        **overrides,
    ):
        """Validate, stamp ``created_at``, insert and return the new record.

        ``schema`` replaces the resource's create schema for this call;
        ``overrides`` are applied after validation.
        """

        values = validate(schema or self.create_schema, data)
        values.update(overrides)
        instance = self.build(values)
        self.session.add(instance)
        self.commit()
        return instance

    def get(self, record_id):
        instance = self._load(parse_id(record_id))
        if instance is None:
            raise self.not_found()
        return instance

    def update(self, record_id, data: Mapping[str, Any] | None):
        """Apply only the provided fields and stamp ``updated_at``."""

        pk = parse_id(record_id)
        values = validate(self.update_schema, data, partial=True)
        self._reject_nulls(values)
        instance = self._load(pk)
        if instance is None:
            raise self.not_found()
        self.apply(instance, values)
        instance.touch()
        self.commit()
        return instance

    def delete(self, record_id) -> None:
        instance = self._load(parse_id(record_id))
        if instance is None:
            raise self.not_found()
        self.session.delete(instance)
        self.commit()

    def list(self, filters=None, sort=None) -> list:
        return self.query.all(self.model, filters, sort or self.default_sort)

    def first(self, filters=None, sort=None):
        return self.query.first(self.model, filters, sort or self.default_sort)

    def count(self, filters=None) -> int:
        return self.query.count(self.model, filters)

    def paginate(self, filters=None, sort=None, page=None, page_size=None) -> Page:
        return self.query.paginate(
            self.model, filters, sort or self.default_sort, page, page_size
        )
