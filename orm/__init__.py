"""Query engine and generic CRUD helpers."""

from .crud import CrudResource, parse_id
from .query import Page, QueryEngine, api_response
from .schemas import EmbeddedSchema, Schema, validate

__all__ = [
    "CrudResource",
    "EmbeddedSchema",
    "Page",
    "QueryEngine",
    "Schema",
    "api_response",
    "parse_id",
    "validate",
]
