"""Schema descriptor model and validation.

The descriptor model never reaches into payload loading, so validation stays
independent of where the validated values come from.
"""

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
from .factories import (
    OPTIONAL,
    REQUIRED,
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
    to_optional_flag,
)
from .json_schema_export import to_json_schema
