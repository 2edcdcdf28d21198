from __future__ import annotations

import pytest

from schema_guard import (
    REQUIRED,
    PayloadError,
    Schema,
    integer,
    load_payload,
    load_payload_from_string,
    text,
    validate_payload_file,
)


def _schema() -> Schema:
    return Schema({"name": text(REQUIRED), "replicas": integer(REQUIRED)})


def test_load_yaml_and_json_files(tmp_path) -> None:
    yaml_path = tmp_path / "service.yaml"
    yaml_path.write_text("name: api\nreplicas: 3\n", encoding="utf-8")
    json_path = tmp_path / "service.json"
    json_path.write_text('{"name": "api", "replicas": 3}', encoding="utf-8")

    assert load_payload(yaml_path) == {"name": "api", "replicas": 3}
    assert load_payload(str(json_path)) == {"name": "api", "replicas": 3}


def test_empty_yaml_loads_as_mapping() -> None:
    assert load_payload_from_string("", "yaml") == {}


def test_yaml_is_loaded_safely() -> None:
    with pytest.raises(PayloadError):
        load_payload_from_string("!!python/object/apply:os.system ['true']", "yaml")


@pytest.mark.parametrize(("content", "fmt"), [("{broken", "json"), ("a: [1, 2", "yaml")])
def test_malformed_payload_raises(content: str, fmt: str) -> None:
    with pytest.raises(PayloadError):
        load_payload_from_string(content, fmt)


def test_unknown_format_raises() -> None:
    with pytest.raises(PayloadError):
        load_payload_from_string("a = 1", "toml")


def test_load_payload_path_errors(tmp_path) -> None:
    with pytest.raises(PayloadError):
        load_payload(tmp_path / "missing.yaml")
    with pytest.raises(PayloadError):
        load_payload(tmp_path)
    other = tmp_path / "payload.txt"
    other.write_text("name: api\n", encoding="utf-8")
    with pytest.raises(PayloadError):
        load_payload(other)


def test_validate_payload_file(tmp_path) -> None:
    good = tmp_path / "good.yml"
    good.write_text("name: api\nreplicas: 2\n", encoding="utf-8")
    bad = tmp_path / "bad.yml"
    bad.write_text("name: api\nreplicas: two\n", encoding="utf-8")
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")

    assert validate_payload_file(_schema(), good) is True
    assert validate_payload_file(_schema(), bad) is False
    assert validate_payload_file(_schema(), listing) is False
