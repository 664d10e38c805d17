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

"""Depth-first traversal over catalog trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, TypeAlias

from codereg.core.type_aliases import CategoryName, DottedPath

from .models import CatalogGroup, ErrorDescriptor

if TYPE_CHECKING:
    from .models import CatalogNode

DescriptorVisitor: TypeAlias = Callable[[ErrorDescriptor, DottedPath], None]

PATH_SEPARATOR = "."


def join_path(prefix: str, key: str) -> DottedPath:
    """Return ``prefix.key`` (or ``key`` alone when ``prefix`` is empty)."""
    return DottedPath(f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key)


def iter_descriptors(node: CatalogNode, path: str = "") -> Iterator[tuple[DottedPath, ErrorDescriptor]]:
    """Yield every descriptor below ``node`` with its dotted path.

    Keys are visited in insertion order; groups are entered depth-first.
    Empty groups yield nothing.

    Args:
        node: Catalog node to walk.
        path: Dotted path of ``node`` itself; child keys are appended to it.

    Yields:
        ``(dotted_path, descriptor)`` pairs.
    """
    if isinstance(node, ErrorDescriptor):
        yield DottedPath(path), node
        return
    for key, child in node.items():
        child_path = join_path(path, key)
        if isinstance(child, CatalogGroup):
            yield from iter_descriptors(child, child_path)
        else:
            yield child_path, child


def traverse_catalog(node: CatalogNode, visitor: DescriptorVisitor, path: str = "") -> None:
    """Invoke ``visitor(descriptor, dotted_path)`` for every descriptor below ``node``."""
    for descriptor_path, descriptor in iter_descriptors(node, path):
        visitor(descriptor, descriptor_path)


def top_level_category(path: str) -> CategoryName:
    """Return the first segment of a dotted path, which names the category."""
    return CategoryName(path.split(PATH_SEPARATOR, 1)[0])


__all__ = [
    "PATH_SEPARATOR",
    "DescriptorVisitor",
    "iter_descriptors",
    "join_path",
    "top_level_category",
    "traverse_catalog",
]
