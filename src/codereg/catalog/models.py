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

"""Catalog data model.

A catalog is a tree of :class:`CatalogGroup` nodes whose leaves are
:class:`ErrorDescriptor` records. The node kind is decided once, when the
tree is built from raw data, so traversal never has to guess what a leaf is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType, ModuleType
from typing import TypeAlias, cast

from codereg.core.model_types import ErrorLevel, LogComponent
from codereg.core.type_aliases import ErrorCodeValue
from codereg.logging import structured_extra

logger: logging.Logger = logging.getLogger("codereg.catalog")

CODE_FIELD = "code"


@dataclass(slots=True, frozen=True)
class ErrorDescriptor:
    """Leaf record of the catalog.

    Attributes:
        code: Code exactly as authored. The range check is responsible for
            proving it is an integer.
        message: Message template shown to users.
        level: Optional severity of the error.
        url: Optional documentation link.
    """

    code: ErrorCodeValue
    message: str = ""
    level: ErrorLevel | None = None
    url: str | None = None

    @property
    def integer_code(self) -> int | None:
        """Return the code when it is a real integer (booleans excluded)."""
        code = self.code
        if isinstance(code, int) and not isinstance(code, bool):
            return code
        return None


def _empty_children() -> Mapping[str, CatalogNode]:
    return MappingProxyType({})


@dataclass(slots=True, frozen=True)
class CatalogGroup:
    """Interior node mapping keys to child nodes in authoring order."""

    children: Mapping[str, CatalogNode] = field(default_factory=_empty_children)

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __getitem__(self, key: str) -> CatalogNode:
        return self.children[key]

    def items(self) -> Iterator[tuple[str, CatalogNode]]:
        """Yield ``(key, node)`` pairs in insertion order."""
        yield from self.children.items()


CatalogNode: TypeAlias = ErrorDescriptor | CatalogGroup
Catalog: TypeAlias = CatalogGroup


def _descriptor_from_mapping(raw: Mapping[str, object]) -> ErrorDescriptor:
    message = raw.get("message", "")
    url = raw.get("url")
    return ErrorDescriptor(
        code=raw[CODE_FIELD],
        message=message if isinstance(message, str) else str(message),
        level=ErrorLevel.coerce(raw.get("level")),
        url=url if isinstance(url, str) else None,
    )


def _descriptor_from_object(raw: object) -> ErrorDescriptor:
    message = getattr(raw, "message", None)
    if message is None:
        message = getattr(raw, "text", "")
    url = getattr(raw, "url", None)
    return ErrorDescriptor(
        code=getattr(raw, CODE_FIELD),
        message=message if isinstance(message, str) else str(message),
        level=ErrorLevel.coerce(getattr(raw, "level", None)),
        url=url if isinstance(url, str) else None,
    )


def _is_descriptor_object(value: object) -> bool:
    if isinstance(value, (type, ModuleType, str, bytes)):
        return False
    return hasattr(value, CODE_FIELD)


def _module_members(module: ModuleType) -> dict[str, object]:
    public = getattr(module, "__all__", None)
    names = list(public) if public is not None else [name for name in vars(module) if not name.startswith("_")]
    members = {name: getattr(module, name) for name in names}
    # Imported modules are never catalog members; only the root may be a module.
    return {name: value for name, value in members.items() if not isinstance(value, ModuleType)}


def build_node(raw: object) -> CatalogNode | None:
    """Discriminate a raw value into a catalog node.

    Args:
        raw: Mapping, module, descriptor-like object, or scalar.

    Returns:
        An :class:`ErrorDescriptor` when ``raw`` carries an own ``code`` field,
        a :class:`CatalogGroup` for any other mapping, and ``None`` for
        modules, scalars and ``None`` (those are skipped).
    """
    if isinstance(raw, ErrorDescriptor | CatalogGroup):
        return raw
    if isinstance(raw, Mapping):
        mapping = cast("Mapping[object, object]", raw)
        if CODE_FIELD in mapping:
            return _descriptor_from_mapping(cast("Mapping[str, object]", mapping))
        return _group_from_mapping(mapping)
    if _is_descriptor_object(raw):
        return _descriptor_from_object(raw)
    return None


def _group_from_mapping(raw: Mapping[object, object]) -> CatalogGroup:
    children: dict[str, CatalogNode] = {}
    for key, value in raw.items():
        node = build_node(value)
        if node is None:
            logger.debug(
                "Skipping non-catalog value at key %s",
                key,
                extra=structured_extra(component=LogComponent.CATALOG, details={"key": str(key)}),
            )
            continue
        children[str(key)] = node
    return CatalogGroup(children=MappingProxyType(children))


def build_catalog(raw: Mapping[str, object] | ModuleType | CatalogGroup) -> Catalog:
    """Build an immutable catalog snapshot from raw data.

    Args:
        raw: Root mapping of category name to category contents, a module whose
            public attributes form the root, or an already built catalog.

    Returns:
        Root :class:`CatalogGroup`. The root is always a group, even when it
        happens to carry a ``code`` key; its scalar members are skipped.
    """
    if isinstance(raw, CatalogGroup):
        return raw
    if isinstance(raw, ModuleType):
        return _group_from_mapping(_module_members(raw))
    return _group_from_mapping(cast("Mapping[object, object]", raw))


__all__ = [
    "CODE_FIELD",
    "Catalog",
    "CatalogGroup",
    "CatalogNode",
    "ErrorDescriptor",
    "build_catalog",
    "build_node",
]
