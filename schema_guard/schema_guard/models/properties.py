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

"""Property descriptors: the acceptable shape of a single value."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from numbers import Integral
from typing import Any, ClassVar, Optional, Pattern, Tuple

from ..exceptions import InvalidArgument
from ..utils.type_tags import UNDEFINED, TypeTag, classify


def _compare_types(optional: bool, declared: TypeTag, actual: TypeTag) -> bool:
    if declared is TypeTag.ANY:
        return actual is not TypeTag.UNDEFINED or optional
    return declared is actual or (optional and actual is TypeTag.UNDEFINED)


def _is_snan(value: Any) -> bool:
    return isinstance(value, Decimal) and value.is_snan()


def _same_literal(allowed: Any, value: Any) -> bool:
    # Strict equality: True must not match 1, while 1.0 still matches 1.
    if classify(allowed) is not classify(value):
        return False
    # Signaling NaNs raise on comparison and equal nothing.
    if _is_snan(allowed) or _is_snan(value):
        return False
    if allowed == value:
        return True
    return (
        isinstance(allowed, float)
        and isinstance(value, float)
        and math.isnan(allowed)
        and math.isnan(value)
    )


def _is_integral(value: Any) -> bool:
    if isinstance(value, Integral):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, Fraction):
        return value.denominator == 1
    return False


@dataclass(frozen=True)
class PropertyDescriptor:
    """Base descriptor shared by every property kind.

    Subclasses fix ``declared_type`` and may narrow the basic check by
    overriding :meth:`refine`. A refinement only ever sees values that
    already passed :meth:`validate_basics`, and never sees ``UNDEFINED``.
    """

    declared_type: ClassVar[TypeTag] = TypeTag.ANY

    optional: bool = False
    allowed_values: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.optional, bool):
            raise InvalidArgument(
                f"{type(self).__name__}: 'optional' must be a bool, got {type(self.optional).__name__}"
            )
        values = self.allowed_values
        if values is None:
            values = ()
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise InvalidArgument(
                f"{type(self).__name__}: 'allowed_values' must be a list of literals, "
                f"got {type(values).__name__}"
            )
        object.__setattr__(self, "allowed_values", tuple(values))

    def validate_basics(self, value: Any) -> bool:
        # An absent optional value passes before the allow-list is consulted.
        if self.optional and value is UNDEFINED:
            return True
        if not _compare_types(self.optional, self.declared_type, classify(value)):
            return False
        if self.allowed_values and not any(_same_literal(a, value) for a in self.allowed_values):
            return False
        return True

    def refine(self, value: Any) -> bool:
        return True

    def validate(self, value: Any) -> bool:
        if not self.validate_basics(value):
            return False
        if value is UNDEFINED:
            return True
        return bool(self.refine(value))


@dataclass(frozen=True)
class TextProp(PropertyDescriptor):
    """A string, optionally constrained by a pattern searched within it.

    A pattern and an allow-list are mutually exclusive.
    """

    declared_type: ClassVar[TypeTag] = TypeTag.STRING

    pattern: Optional[Pattern[str]] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.pattern is None:
            return
        if self.allowed_values:
            raise InvalidArgument("TextProp: 'pattern' and 'allowed_values' cannot be combined")
        if isinstance(self.pattern, str):
            try:
                object.__setattr__(self, "pattern", re.compile(self.pattern))
            except re.error as exc:
                raise InvalidArgument(f"TextProp: invalid pattern {self.pattern!r}: {exc}") from exc
        elif not isinstance(self.pattern, re.Pattern):
            raise InvalidArgument(
                f"TextProp: 'pattern' must be a string or compiled regex, got {type(self.pattern).__name__}"
            )

    def refine(self, value: Any) -> bool:
        if self.pattern is None:
            return True
        return self.pattern.search(value) is not None


@dataclass(frozen=True)
class NumberProp(PropertyDescriptor):
    declared_type: ClassVar[TypeTag] = TypeTag.NUMBER


@dataclass(frozen=True)
class IntegerProp(PropertyDescriptor):
    """A number without a fractional component.

    The check applies to every present value, optional or not.
    """

    declared_type: ClassVar[TypeTag] = TypeTag.NUMBER

    def refine(self, value: Any) -> bool:
        return _is_integral(value)


@dataclass(frozen=True)
class BigIntProp(PropertyDescriptor):
    declared_type: ClassVar[TypeTag] = TypeTag.BIGINT


@dataclass(frozen=True)
class BooleanProp(PropertyDescriptor):
    declared_type: ClassVar[TypeTag] = TypeTag.BOOLEAN


@dataclass(frozen=True)
class AbsentProp(PropertyDescriptor):
    """Accepts only ``UNDEFINED``, i.e. the field must not be present."""

    declared_type: ClassVar[TypeTag] = TypeTag.UNDEFINED

    optional: bool = field(default=False, init=False)


@dataclass(frozen=True)
class FunctionProp(PropertyDescriptor):
    declared_type: ClassVar[TypeTag] = TypeTag.FUNCTION


# TODO: check element types of the sequence (classify_all already supports the tag filter).
@dataclass(frozen=True)
class SequenceProp(PropertyDescriptor):
    declared_type: ClassVar[TypeTag] = TypeTag.ARRAY


@dataclass(frozen=True)
class AnyProp(PropertyDescriptor):
    declared_type: ClassVar[TypeTag] = TypeTag.ANY
