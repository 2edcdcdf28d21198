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

"""Runtime configuration for schema_guard."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging


@dataclass
class ValidatorConfig:
    """Configuration class for schema validation."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    # Log faults swallowed by Schema.validate at WARNING instead of DEBUG.
    report_faults: bool = True

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('SCHEMA_GUARD_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SCHEMA_GUARD_PRINT_LEVEL', 'ERROR'),
            report_faults=os.getenv('SCHEMA_GUARD_REPORT_FAULTS', 'true').lower() == 'true',
        )

    @property
    def fault_log_level(self) -> int:
        return logging.WARNING if self.report_faults else logging.DEBUG

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)


# Global configuration instance
validator_config = ValidatorConfig.from_env()
