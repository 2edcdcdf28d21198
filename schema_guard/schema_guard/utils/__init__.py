"""Leaf helpers shared by the schema engine."""

from .type_tags import (
    MAX_SAFE_INTEGER,
    UNDEFINED,
    TypeTag,
    all_truthy,
    classify,
    classify_all,
)
