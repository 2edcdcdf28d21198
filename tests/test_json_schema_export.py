from __future__ import annotations

import jsonschema
import pytest

from schema_guard import (
    MAX_SAFE_INTEGER,
    OPTIONAL,
    REQUIRED,
    InvalidSchema,
    Schema,
    absent,
    anything,
    big_integer,
    boolean,
    function,
    integer,
    number,
    sequence,
    structure,
    text,
    to_json_schema,
)
from schema_guard.models.json_schema_export import JSON_SCHEMA_DIALECT


def _order_schema() -> Schema:
    return Schema(
        {
            "id": integer(REQUIRED),
            "status": text(REQUIRED, ["open", "closed"]),
            "note": text(OPTIONAL, pattern=r"^[a-z ]+$"),
            "tags": sequence(OPTIONAL),
            "customer": {"name": text(REQUIRED), "vip": boolean(OPTIONAL)},
            "shipping": structure(
                REQUIRED,
                {"method": text(REQUIRED, ["post"]), "zip": text(REQUIRED)},
                {"method": text(REQUIRED, ["pickup"]), "store": number(REQUIRED)},
            ),
        }
    )


def test_export_structure() -> None:
    document = to_json_schema(_order_schema())

    assert document["$schema"] == JSON_SCHEMA_DIALECT
    assert document["type"] == "object"
    assert document["required"] == ["id", "status", "customer", "shipping"]
    assert document["properties"]["id"] == {
        "type": "integer",
        "minimum": -MAX_SAFE_INTEGER,
        "maximum": MAX_SAFE_INTEGER,
    }
    assert document["properties"]["status"] == {"type": "string", "enum": ["open", "closed"]}
    assert document["properties"]["note"] == {"type": "string", "pattern": "^[a-z ]+$"}
    assert document["properties"]["customer"]["required"] == ["name"]
    assert len(document["properties"]["shipping"]["anyOf"]) == 2


@pytest.mark.parametrize(
    "candidate",
    [
        {"id": 1, "status": "open", "customer": {"name": "Ann"}, "shipping": {"method": "post", "zip": "0150"}},
        {"id": 2, "status": "closed", "customer": {"name": "Bo", "vip": True}, "shipping": {"method": "pickup", "store": 7}},
        {"id": 3, "status": "open", "customer": {"name": "Cy"}, "shipping": {"method": "drone"}},
        {"id": 4.5, "status": "open", "customer": {"name": "Di"}, "shipping": {"method": "post", "zip": "1"}},
        {"id": 5, "status": "pending", "customer": {"name": "Ed"}, "shipping": {"method": "post", "zip": "1"}},
        {"id": 6, "status": "open", "note": "Not Lower", "customer": {"name": "Flo"}, "shipping": {"method": "post", "zip": "1"}},
        {"id": 7, "status": "open", "shipping": {"method": "post", "zip": "1"}},
        {"id": 2**60, "status": "open", "customer": {"name": "Gus"}, "shipping": {"method": "post", "zip": "1"}},
        {"id": -(MAX_SAFE_INTEGER + 1), "status": "open", "customer": {"name": "Hal"}, "shipping": {"method": "post", "zip": "1"}},
        {"id": MAX_SAFE_INTEGER, "status": "open", "customer": {"name": "Ida"}, "shipping": {"method": "post", "zip": "1"}},
    ],
)
def test_exported_schema_agrees_with_validate(candidate: dict) -> None:
    schema = _order_schema()
    validator = jsonschema.Draft202012Validator(to_json_schema(schema))
    assert validator.is_valid(candidate) is schema.validate(candidate)


def test_export_absent_and_wildcard() -> None:
    document = to_json_schema(Schema({"legacy": absent(), "extra": anything(OPTIONAL)}))
    assert document["properties"]["legacy"] == {"not": {}}
    assert document["properties"]["extra"] == {}
    assert "required" not in document


def test_export_single_descriptor() -> None:
    document = to_json_schema(number(REQUIRED, [1, 2]))
    assert document == {
        "$schema": JSON_SCHEMA_DIALECT,
        "type": "number",
        "minimum": -MAX_SAFE_INTEGER,
        "maximum": MAX_SAFE_INTEGER,
        "enum": [1, 2],
    }


def test_export_rejects_functions() -> None:
    with pytest.raises(InvalidSchema):
        to_json_schema(Schema({"callback": function(REQUIRED)}))


def test_export_rejects_custom_validators() -> None:
    class Even:
        def validate(self, value: object) -> bool:
            return isinstance(value, int) and value % 2 == 0

    with pytest.raises(InvalidSchema):
        to_json_schema(Schema({"n": Even()}))


@pytest.mark.parametrize("value", [0, 7, -7, MAX_SAFE_INTEGER, MAX_SAFE_INTEGER + 1, -(2**60), 2**64, 1.5])
def test_exported_numeric_kinds_agree_with_validate_at_the_bigint_boundary(value: object) -> None:
    schema = Schema({"n": integer(REQUIRED), "x": number(REQUIRED), "big": big_integer(OPTIONAL)})
    candidates = [
        {"n": value, "x": 1},
        {"n": 1, "x": value},
        {"n": 1, "x": 1, "big": value},
    ]
    validator = jsonschema.Draft202012Validator(to_json_schema(schema))
    for candidate in candidates:
        assert validator.is_valid(candidate) is schema.validate(candidate)
