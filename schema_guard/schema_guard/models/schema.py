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

"""Schema objects and the recursive validation walk."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, Tuple

from .. import config
from ..exceptions import InvalidSchema
from ..utils.type_tags import UNDEFINED, TypeTag, classify
from .properties import PropertyDescriptor

logger = logging.getLogger(__name__)


def _is_custom_validator(entry: Any) -> bool:
    return not isinstance(entry, Mapping) and callable(getattr(entry, "validate", None))


def _build_entry(entry: Any, path: str) -> Any:
    if isinstance(entry, (PropertyDescriptor, Schema)):
        return entry
    if isinstance(entry, Mapping):
        return Schema(entry, _path=path)
    if _is_custom_validator(entry):
        return entry
    raise InvalidSchema(
        f"Field '{path}' must be a property descriptor or a nested mapping, got {type(entry).__name__}"
    )


def _field_value(candidate: Any, name: Any) -> Any:
    if isinstance(candidate, Mapping):
        return candidate.get(name, UNDEFINED)
    if isinstance(name, str):
        return getattr(candidate, name, UNDEFINED)
    return UNDEFINED


class Schema(Mapping):
    """An immutable mapping from field name to validator.

    Nested plain mappings in ``definition`` are wrapped into nested
    schemas when the schema is built; the caller's mapping is copied,
    never modified.

    Example::

        user = Schema({
            "name": text(REQUIRED),
            "age": integer(OPTIONAL),
            "address": {"city": text(REQUIRED)},
        })
        user.validate({"name": "Alice", "address": {"city": "Oslo"}})  # => True

    Raises:
        InvalidSchema: If ``definition`` is not a mapping, or one of its
            entries is neither a validator nor a mapping.
    """

    __slots__ = ("_fields",)

    def __init__(self, definition: Mapping, *, _path: str = "") -> None:
        if not isinstance(definition, Mapping):
            where = f" at '{_path}'" if _path else ""
            raise InvalidSchema(
                f"Provided schema{where} is not object-like (type: {type(definition).__name__})"
            )

        fields = {}
        for name, entry in definition.items():
            path = f"{_path}.{name}" if _path else str(name)
            fields[name] = _build_entry(entry, path)
        object.__setattr__(self, "_fields", MappingProxyType(fields))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Schema objects are immutable")

    def __reduce__(self):
        return (Schema, (dict(self._fields),))

    def __getitem__(self, name: Any) -> Any:
        return self._fields[name]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Schema({dict(self._fields)!r})"

    def validate(self, candidate: Any) -> bool:
        """Return True if ``candidate`` conforms to this schema.

        Fields are checked in schema order and the walk stops at the first
        failing field. Never raises: an internal error counts as a failure.
        """
        try:
            if classify(candidate) is not TypeTag.OBJECT:
                return False

            for name, validator in self._fields.items():
                if not validator.validate(_field_value(candidate, name)):
                    return False

            return True

        except Exception as exc:
            logger.log(
                config.validator_config.fault_log_level,
                f"Schema validation aborted by an internal error: {exc!r}",
            )
            return False


@dataclass(frozen=True)
class StructureProp(PropertyDescriptor):
    """An object, optionally required to match one of several schemas.

    Each alternative is checked against the whole candidate; with no
    alternatives any object passes.
    """

    declared_type: ClassVar[TypeTag] = TypeTag.OBJECT

    schemas: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.schemas, Mapping) or not isinstance(self.schemas, (list, tuple)):
            raise InvalidSchema(
                f"StructureProp: 'schemas' must be a list of schemas, got {type(self.schemas).__name__}"
            )
        built = []
        for idx, alternative in enumerate(self.schemas):
            if isinstance(alternative, Schema):
                built.append(alternative)
            elif isinstance(alternative, Mapping):
                built.append(Schema(alternative, _path=f"<any of #{idx}>"))
            elif _is_custom_validator(alternative):
                built.append(alternative)
            else:
                raise InvalidSchema(
                    f"StructureProp: alternative #{idx} must be a schema or a mapping, "
                    f"got {type(alternative).__name__}"
                )
        object.__setattr__(self, "schemas", tuple(built))

    def refine(self, value: Any) -> bool:
        if not self.schemas:
            return True
        return any(alternative.validate(value) for alternative in self.schemas)
