from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, FrozenSet, List, Optional, Union

from ..exceptions import InvalidArgument


# Largest integer a double represents exactly; wider ints are reported as bigint.
MAX_SAFE_INTEGER = 2**53 - 1

_TEXT_TYPES = (str, bytes, bytearray, memoryview)
_TAG_COLLECTIONS = (list, tuple, set, frozenset)


class TypeTag(str, enum.Enum):
    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    OBJECT = "object"
    FUNCTION = "function"
    ARRAY = "array"
    NULL = "null"

    # Wildcard for descriptor positions; classify() never returns it.
    ANY = "any"

    def __str__(self) -> str:
        return self.value


TagFilter = Union[List[Union[TypeTag, str]], tuple, set, frozenset]


class _Undefined:
    """The absence value.

    Distinct from ``None``: ``None`` is an intentional "null" while
    ``UNDEFINED`` stands for a value that was never supplied (a missing key).
    """

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def _tag_names(allowed: Any, caller: str) -> FrozenSet[str]:
    if not isinstance(allowed, _TAG_COLLECTIONS):
        raise InvalidArgument(
            f"{caller}: 'allowed' was supplied but it is not a collection of type tags "
            f"(type: {type(allowed).__name__})"
        )
    # Enum members hash by name, so compare on the plain tag strings.
    return frozenset(tag.value if isinstance(tag, TypeTag) else tag for tag in allowed)


def _classify(value: Any) -> TypeTag:
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if value is None:
        return TypeTag.NULL
    # bool subclasses int, so it has to be checked first
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Integral):
        return TypeTag.NUMBER if abs(value) <= MAX_SAFE_INTEGER else TypeTag.BIGINT
    if isinstance(value, (Real, Decimal)):
        return TypeTag.NUMBER
    if isinstance(value, enum.Enum):
        return TypeTag.SYMBOL
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return TypeTag.ARRAY
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


def classify(value: Any, allowed: Optional[TagFilter] = None) -> Union[TypeTag, bool]:
    """A more thorough ``type()`` for schema checks.

    Unlike a plain type lookup it reports ``array`` and ``null`` as their own
    tags instead of folding them into ``object``.

    When ``allowed`` is supplied the tag is compared against it instead::

        classify("text")                            # => TypeTag.STRING
        classify("text", ["string", "number"])      # => True
        classify({}, ["string", "number", "null"])  # => False

    Raises:
        InvalidArgument: If ``allowed`` is given but is not a collection of tags.
    """
    if allowed is not None:
        names = _tag_names(allowed, "classify(value, allowed)")
        return _classify(value).value in names
    return _classify(value)


def classify_all(values: Iterable[Any], allowed: Optional[TagFilter] = None) -> Union[List[TypeTag], bool]:
    """Classify every item of ``values``.

    With ``allowed`` the result is ``True`` only if every item's tag is in it;
    evaluation stops at the first item that is not::

        classify_all(["text", 2**60])                    # => [STRING, BIGINT]
        classify_all(["text", 1], ["string", "number"])  # => True
        classify_all([UNDEFINED], ["string", "null"])    # => False
    """
    if isinstance(values, _TEXT_TYPES) or not isinstance(values, Iterable):
        raise InvalidArgument(
            f"classify_all(values, allowed): 'values' must be a sequence of values "
            f"(type: {type(values).__name__})"
        )
    if allowed is not None:
        names = _tag_names(allowed, "classify_all(values, allowed)")
        return all(_classify(value).value in names for value in values)
    return [_classify(value) for value in values]


def all_truthy(*items: Any) -> bool:
    """Return True if all the provided items are truthy."""
    return all(items)
