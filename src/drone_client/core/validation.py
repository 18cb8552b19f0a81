"""Argument validation for API calls.

Everything here runs synchronously and before any request is built, so a
failure is observable with a plain `try/except` around the method call.
Pydantic does the checking; its errors are folded into a single
`ValidationError` naming the first offending field and the violated constraint.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel, StrictBool, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from drone_client.core.domain.schemas import NonEmptyStr, Number
from drone_client.core.errors import ValidationError

P = TypeVar("P", bound=BaseModel)

_STRING: TypeAdapter[str] = TypeAdapter(NonEmptyStr)
_NUMBER: TypeAdapter[int | float] = TypeAdapter(Number)
_BOOLEAN: TypeAdapter[bool] = TypeAdapter(StrictBool)

_CONSTRAINTS = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_short": "is not allowed to be empty",
    "bool_type": "must be a boolean",
    "int_type": "must be a number",
    "float_type": "must be a number",
    "int_from_float": "must be an integer",
    "dict_type": "must be of type object",
    "model_type": "must be of type object",
    "model_attributes_type": "must be of type object",
    "url_type": "must be a valid uri",
    "url_parsing": "must be a valid uri",
    "url_syntax_violation": "must be a valid uri",
    "url_scheme": "must be a valid uri with a scheme matching the https? pattern",
    "extra_forbidden": "is not allowed",
}


def raise_validation_error(field: str, constraint: str, *, label: str | None = None) -> NoReturn:
    message = f'Must specify {label or field}: "{field}" {constraint}'
    raise ValidationError(message, field=field, constraint=constraint)


def describe_error(error: Mapping[str, Any]) -> str:
    """Human readable constraint for a single Pydantic error entry."""

    kind = error.get("type", "")
    if kind in _CONSTRAINTS:
        return _CONSTRAINTS[kind]

    ctx = error.get("ctx") or {}
    if kind == "literal_error":
        return f"must be one of [{ctx.get('expected', '')}]"
    if kind == "greater_than":
        return f"must be greater than {ctx.get('gt')}"
    message = str(error.get("msg", "is invalid"))
    if "email" in message:
        return "must be a valid email"
    return message


def raise_validation_error_from(
    exc: PydanticValidationError,
    *,
    label: str,
    field: str | None = None,
) -> NoReturn:
    """Re-raise the first Pydantic error as a `ValidationError`.

    `field` overrides the location reported by Pydantic; scalar adapters have
    no location of their own.
    """

    first = exc.errors()[0]
    if field is None:
        loc = first.get("loc") or ()
        field = str(loc[0]) if loc else label
    raise_validation_error(field, describe_error(first), label=label)


def require_string(value: Any, name: str) -> str:
    if value is None:
        raise_validation_error(name, "is required")
    try:
        return _STRING.validate_python(value)
    except PydanticValidationError as exc:
        raise_validation_error_from(exc, label=name, field=name)


def require_number(value: Any, name: str) -> int | float:
    if value is None:
        raise_validation_error(name, "is required")
    try:
        number = _NUMBER.validate_python(value)
    except PydanticValidationError as exc:
        raise_validation_error_from(exc, label=name, field=name)
    # Drone parses ids and page sizes as integers: 300.0 goes out as 300.
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def require_boolean(value: Any, name: str) -> bool:
    # None is a wrong type here, not an omission: boolean arguments carry defaults.
    try:
        return _BOOLEAN.validate_python(value)
    except PydanticValidationError as exc:
        raise_validation_error_from(exc, label=name, field=name)


def validate_payload(
    schema: type[P],
    value: Any,
    name: str,
    *,
    required: bool = False,
) -> Any:
    """Check `value` against `schema` and return what should be sent.

    Mappings are returned as given (validation never rewrites the caller's
    data); model instances are dumped with their aliases and only the fields
    that were set.
    """

    if value is None:
        if required:
            raise_validation_error(name, "is required")
        return None

    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_unset=True, mode="json")
    elif not isinstance(value, Mapping):
        raise_validation_error(name, "must be of type object")

    try:
        schema.model_validate(dict(value))
    except PydanticValidationError as exc:
        raise_validation_error_from(exc, label=name)
    return value
