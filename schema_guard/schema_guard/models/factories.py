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

"""Constructor functions for property descriptors.

Every constructor takes an optionality marker as its first argument:

* ``"?"`` (:data:`OPTIONAL`) or ``True`` makes the property optional.
* ``"!"`` (:data:`REQUIRED`), ``False`` or omitting it makes it required.
"""

from typing import Any, Mapping, Optional, Pattern, Sequence, Union

from ..exceptions import InvalidArgument
from .properties import (
    AbsentProp,
    AnyProp,
    BigIntProp,
    BooleanProp,
    FunctionProp,
    IntegerProp,
    NumberProp,
    SequenceProp,
    TextProp,
)
from .schema import Schema, StructureProp

OPTIONAL = "?"
REQUIRED = "!"

_MARKS = {OPTIONAL: True, REQUIRED: False}

OptionalMark = Union[str, bool, None]


def to_optional_flag(mark: OptionalMark) -> bool:
    """Translate an optionality marker into the descriptor's ``optional`` flag."""
    if mark is None:
        return False
    if isinstance(mark, bool):
        return mark
    if isinstance(mark, str) and mark in _MARKS:
        return _MARKS[mark]
    raise InvalidArgument(
        f"Invalid optionality marker {mark!r}. Expected '{OPTIONAL}', '{REQUIRED}', a bool or None."
    )


def _values(values: Optional[Sequence[Any]]) -> tuple:
    return () if values is None else values


def text(
    optional: OptionalMark = None,
    values: Optional[Sequence[str]] = None,
    pattern: Union[str, Pattern[str], None] = None,
) -> TextProp:
    if values and pattern is not None:
        raise InvalidArgument("text(): pass either an allow-list or a pattern, not both")
    return TextProp(to_optional_flag(optional), _values(values), pattern=pattern)


def number(optional: OptionalMark = None, values: Optional[Sequence[float]] = None) -> NumberProp:
    return NumberProp(to_optional_flag(optional), _values(values))


def integer(optional: OptionalMark = None, values: Optional[Sequence[int]] = None) -> IntegerProp:
    return IntegerProp(to_optional_flag(optional), _values(values))


def big_integer(optional: OptionalMark = None, values: Optional[Sequence[int]] = None) -> BigIntProp:
    return BigIntProp(to_optional_flag(optional), _values(values))


def boolean(optional: OptionalMark = None) -> BooleanProp:
    return BooleanProp(to_optional_flag(optional))


def absent() -> AbsentProp:
    return AbsentProp()


def function(optional: OptionalMark = None) -> FunctionProp:
    return FunctionProp(to_optional_flag(optional))


def sequence(optional: OptionalMark = None) -> SequenceProp:
    return SequenceProp(to_optional_flag(optional))


def anything(optional: OptionalMark = None) -> AnyProp:
    return AnyProp(to_optional_flag(optional))


def structure(optional: OptionalMark = None, *schemas: Union[Schema, Mapping]) -> StructureProp:
    """An object field, matching any one of ``schemas`` when some are given.

    Example::

        shape = structure(REQUIRED, {"kind": text(), "a": number()}, {"kind": text(), "b": number()})
    """
    return StructureProp(to_optional_flag(optional), schemas=schemas)
