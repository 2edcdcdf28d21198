# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Loading of untrusted JSON/YAML payloads ahead of schema validation."""

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml

from ..exceptions import PayloadError
from ..models.schema import Schema

logger = logging.getLogger(__name__)

_FORMATS_BY_SUFFIX = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def load_payload_from_string(content: str, fmt: str = "yaml") -> Any:
    """Parse payload text.

    Args:
        content: Raw payload text
        fmt: Either "yaml" or "json"

    Returns:
        The deserialized value; an empty YAML document loads as ``{}``

    Raises:
        PayloadError: If the format is unknown or the text cannot be parsed
    """
    if fmt == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise PayloadError(f"Failed to parse JSON payload: {exc}") from exc

    if fmt == "yaml":
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise PayloadError(f"Failed to parse YAML payload: {exc}") from exc
        return {} if data is None else data

    raise PayloadError(f"Unsupported payload format: '{fmt}'. Expected 'yaml' or 'json'")


def load_payload(file_path: Union[str, Path]) -> Any:
    """Load a payload file, choosing the parser from its suffix."""
    path = Path(file_path)

    if not path.exists():
        raise PayloadError(f"Payload file not found: {path}")

    if not path.is_file():
        raise PayloadError(f"Path is not a file: {path}")

    fmt = _FORMATS_BY_SUFFIX.get(path.suffix.lower())
    if fmt is None:
        raise PayloadError(
            f"Unsupported payload file suffix '{path.suffix}': {path}. "
            f"Expected one of {sorted(_FORMATS_BY_SUFFIX)}"
        )

    logger.debug(f"Loading {fmt} payload: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PayloadError(f"Failed to read payload file {path}: {exc}") from exc

    try:
        return load_payload_from_string(content, fmt)
    except PayloadError as exc:
        raise PayloadError(f"{exc} (file: {path})") from exc


def validate_payload_file(schema: Schema, file_path: Union[str, Path]) -> bool:
    """Load a payload file and validate it against ``schema``.

    Loading errors propagate as :class:`PayloadError`; the validation
    itself only ever answers True or False.
    """
    payload = load_payload(file_path)
    valid = schema.validate(payload)
    if not valid:
        logger.info(f"Payload does not conform to schema: {file_path}")
    return valid
