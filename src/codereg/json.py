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

"""JSON value shapes and helpers used by codereg reports and logs.

Kept free of logging, configuration and CLI imports so every layer can use it.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TypeAlias, cast

from pydantic import JsonValue

__all__ = [
    "JSONMapping",
    "JSONValue",
    "dumps",
    "normalize_enums_for_json",
]

JSONValue: TypeAlias = JsonValue
JSONMapping = dict[str, JsonValue]


def normalize_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values to their string payloads.

    Args:
        value: Arbitrary Python object hierarchy that may include `Enum`
            instances, mappings, or sequences.

    Returns:
        A JSON-compatible structure with enum keys and values replaced by
        their `.value` payloads and unknown objects rendered with `str()`.
    """
    if isinstance(value, Enum):
        return cast("JSONValue", value.value)
    if isinstance(value, dict):
        result: dict[str, JSONValue] = {}
        for key, item in cast("dict[object, object]", value).items():
            norm_key = str(key.value) if isinstance(key, Enum) else str(key)
            result[norm_key] = normalize_enums_for_json(item)
        return result
    if isinstance(value, (list, tuple)):
        return [normalize_enums_for_json(item) for item in cast("list[object]", value)]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def dumps(value: object, *, indent: int | None = 2) -> str:
    """Serialise `value` to JSON after enum normalisation.

    Args:
        value: Object hierarchy to serialise.
        indent: Indentation forwarded to `json.dumps`.

    Returns:
        JSON text.
    """
    return json.dumps(normalize_enums_for_json(value), indent=indent, ensure_ascii=False)
