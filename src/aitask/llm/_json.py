from __future__ import annotations

import json
from typing import Any, TypeVar

from jsonschema import validate
from jsonschema.exceptions import ValidationError as _SchemaValidationError
from pydantic import TypeAdapter
from pydantic import ValidationError as _PydanticValidationError

from .errors import DecodeError

T = TypeVar("T")


def parse_json(text: str) -> Any:
    """Parse JSON from a model response.

    Assumes the model was instructed to print JSON only: no fence stripping.
    """

    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Failed to parse JSON: {e}") from e


def validate_json(instance: Any, schema: dict[str, Any]) -> None:
    try:
        validate(instance=instance, schema=schema)
    except _SchemaValidationError as e:
        raise DecodeError(f"JSON schema validation failed: {e.message}") from e


def decode_with_schema(text: str, schema: dict[str, Any]) -> Any:
    data = parse_json(text)
    validate_json(data, schema)
    return data


def decode_as(text: str, shape: type[T] | Any) -> T:
    """Decode `text` as JSON into a value of `shape`.

    `shape` is anything pydantic can validate: builtins and generics
    (`list[str]`), TypedDicts, dataclasses and models. Validation is strict:
    missing required fields and type coercions ("30" for an int) are errors.
    """

    try:
        adapter = TypeAdapter(shape)
    except Exception as e:  # noqa: BLE001
        raise DecodeError(f"Unsupported target shape {shape!r}: {e}") from e

    try:
        return adapter.validate_json(text, strict=True)
    except _PydanticValidationError as e:
        raise DecodeError(f"Failed to decode response as {shape!r}: {e}") from e
