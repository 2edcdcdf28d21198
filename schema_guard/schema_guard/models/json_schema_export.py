"""Render schemas as JSON Schema (Draft 2020-12) documents.

The export is one-way. Python regular expressions are emitted as-is, so a
pattern relying on Python-only syntax may behave differently in other
JSON Schema implementations.

Numbers and integers are bounded to +/-MAX_SAFE_INTEGER and big integers
lie outside that range, matching how ints are classified. JSON Schema cannot
tell an integral float from an int, so floats beyond that range (which
validate() accepts as numbers) are rejected by the exported document.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Union

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from ..exceptions import InvalidSchema
from ..utils.type_tags import MAX_SAFE_INTEGER
from .properties import (
    AbsentProp,
    AnyProp,
    BigIntProp,
    BooleanProp,
    FunctionProp,
    IntegerProp,
    NumberProp,
    PropertyDescriptor,
    SequenceProp,
    TextProp,
)
from .schema import Schema, StructureProp

logger = logging.getLogger(__name__)

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

_SAFE_RANGE = {"minimum": -MAX_SAFE_INTEGER, "maximum": MAX_SAFE_INTEGER}

_SIMPLE_TYPES = {
    NumberProp: {"type": "number", **_SAFE_RANGE},
    IntegerProp: {"type": "integer", **_SAFE_RANGE},
    BigIntProp: {"type": "integer", "not": dict(_SAFE_RANGE)},
    BooleanProp: {"type": "boolean"},
    SequenceProp: {"type": "array"},
}


def _is_required(validator: Any) -> bool:
    if isinstance(validator, AbsentProp):
        return False
    return not getattr(validator, "optional", False)


def _schema_document(schema: Schema, path: str) -> Dict[str, Any]:
    properties: Dict[str, Any] = {}
    required: List[str] = []
    for name, validator in schema.items():
        key = str(name)
        properties[key] = _export(validator, f"{path}/{key}")
        if _is_required(validator):
            required.append(key)

    doc: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        doc["required"] = required
    return doc


def _export(spec: Any, path: str) -> Dict[str, Any]:
    if isinstance(spec, Schema):
        return _schema_document(spec, path)

    if isinstance(spec, StructureProp):
        doc: Dict[str, Any] = {"type": "object"}
        if spec.schemas:
            doc["anyOf"] = [_export(alt, f"{path}/anyOf/{idx}") for idx, alt in enumerate(spec.schemas)]
    elif isinstance(spec, TextProp):
        doc = {"type": "string"}
        if spec.pattern is not None:
            doc["pattern"] = spec.pattern.pattern
    elif isinstance(spec, AbsentProp):
        return {"not": {}}
    elif isinstance(spec, AnyProp):
        doc = {}
    elif type(spec) in _SIMPLE_TYPES:
        doc = copy.deepcopy(_SIMPLE_TYPES[type(spec)])
    elif isinstance(spec, FunctionProp):
        raise InvalidSchema(f"Field '{path or '/'}' holds a function, which has no JSON Schema equivalent")
    else:
        raise InvalidSchema(
            f"Field '{path or '/'}' uses {type(spec).__name__}, which cannot be exported to JSON Schema"
        )

    if isinstance(spec, PropertyDescriptor) and spec.allowed_values:
        doc["enum"] = list(spec.allowed_values)
    return doc


def to_json_schema(spec: Union[Schema, PropertyDescriptor], *, check: bool = True) -> Dict[str, Any]:
    """Export a schema or a single descriptor as a JSON Schema document.

    Args:
        spec: Schema or descriptor to export
        check: Verify the generated document with jsonschema's metaschema

    Returns:
        JSON Schema dictionary

    Raises:
        InvalidSchema: If part of the schema has no JSON Schema equivalent,
            or the generated document fails the metaschema check
    """
    document = {"$schema": JSON_SCHEMA_DIALECT, **_export(spec, "")}

    if check:
        try:
            Draft202012Validator.check_schema(document)
        except SchemaError as e:
            raise InvalidSchema(f"Generated JSON Schema is invalid: {e.message}") from e

    logger.debug(f"Exported JSON Schema with {len(document.get('properties', {}))} top-level properties")
    return document
