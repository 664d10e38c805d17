# Copyright 2025 CrownOps Engineering
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

"""Subcommand implementations for the codereg CLI."""

from __future__ import annotations

from .check import execute_check, register_check_command
from .codes import execute_list, execute_next_code, register_codes_commands

__all__ = [
    "execute_check",
    "execute_list",
    "execute_next_code",
    "register_check_command",
    "register_codes_commands",
]
