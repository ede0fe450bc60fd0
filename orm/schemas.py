"""Base classes and helpers for the pydantic input schemas."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from utils.errors import ValidationError


class Schema(BaseModel):
    """Input schema. Accepts camelCase keys (the wire format) or field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


class EmbeddedSchema(Schema):
    """A copy of another record stored inside a parent's JSON column.

    Dumps with camelCase keys so embedded copies look like the records they
    were copied from.
    """

    @model_serializer(mode="wrap")
    def _dump_by_alias(self, handler):
        data = handler(self)
        return {to_camel(key): value for key, value in data.items()}


def first_error(exc: PydanticValidationError) -> ValidationError:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ())) or None
    message = error.get("msg", "Invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    if field:
        message = f"{field}: {message}"
    return ValidationError(message, field=field)


def validate(schema: type[Schema], data: Any, *, partial: bool = False) -> dict:
    """Validate ``data`` and return attribute-keyed values.

    With ``partial`` only the keys the caller actually sent are returned.
    """

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValidationError("Payload must be an object.")
    try:
        parsed = schema.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise first_error(exc) from None
    return parsed.model_dump(exclude_unset=partial)
