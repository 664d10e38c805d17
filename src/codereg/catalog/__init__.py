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

"""Error catalog model, traversal and loading."""

from __future__ import annotations

from .loader import (
    CatalogFormatError,
    CatalogImportError,
    CatalogLoadError,
    catalog_from_object,
    detect_catalog_format,
    load_catalog,
)
from .models import CODE_FIELD, Catalog, CatalogGroup, CatalogNode, ErrorDescriptor, build_catalog, build_node
from .traversal import DescriptorVisitor, iter_descriptors, join_path, top_level_category, traverse_catalog

__all__ = [
    "CODE_FIELD",
    "Catalog",
    "CatalogFormatError",
    "CatalogGroup",
    "CatalogImportError",
    "CatalogLoadError",
    "CatalogNode",
    "DescriptorVisitor",
    "ErrorDescriptor",
    "build_catalog",
    "build_node",
    "catalog_from_object",
    "detect_catalog_format",
    "iter_descriptors",
    "join_path",
    "load_catalog",
    "top_level_category",
    "traverse_catalog",
]
