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

"""Runtime schema validation for untrusted values."""

__version__ = "0.1.0"

from .utils.logging_utils import install_null_handler

install_null_handler()

from .exceptions import InvalidArgument, InvalidSchema, PayloadError, SchemaGuardError  # noqa: E402
from .utils.type_tags import (  # noqa: E402
    MAX_SAFE_INTEGER,
    UNDEFINED,
    TypeTag,
    all_truthy,
    classify,
    classify_all,
)
from .models import (  # noqa: E402
    OPTIONAL,
    REQUIRED,
    AbsentProp,
    AnyProp,
    BigIntProp,
    BooleanProp,
    FunctionProp,
    IntegerProp,
    NumberProp,
    PropertyDescriptor,
    Schema,
    SequenceProp,
    StructureProp,
    TextProp,
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
    to_optional_flag,
)
from .parsing import load_payload, load_payload_from_string, validate_payload_file  # noqa: E402
from .config import ValidatorConfig, validator_config  # noqa: E402
