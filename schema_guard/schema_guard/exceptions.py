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

"""Custom exceptions for schema_guard."""


class SchemaGuardError(Exception):
    """Base exception for schema_guard errors."""
    pass


class InvalidSchema(SchemaGuardError):
    """Exception raised when a schema definition is malformed."""
    pass


class InvalidArgument(SchemaGuardError, TypeError):
    """Exception raised when a helper receives an argument of the wrong shape."""
    pass


class PayloadError(SchemaGuardError):
    """Exception raised when a payload file cannot be read or parsed."""
    pass
