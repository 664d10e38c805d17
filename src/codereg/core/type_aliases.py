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

"""Semantic type aliases used by codereg."""

from __future__ import annotations

from typing import NewType, TypeAlias

CategoryName = NewType("CategoryName", str)
DottedPath = NewType("DottedPath", str)

ErrorCodeValue: TypeAlias = object
"""Raw descriptor code exactly as authored; only range checks prove it is an int."""

__all__ = ["CategoryName", "DottedPath", "ErrorCodeValue"]
