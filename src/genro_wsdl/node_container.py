# Copyright (c) 2025 Softwell Srl, Milano, Italy
# SPDX-License-Identifier: Apache-2.0
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

"""NodeContainer: Ordered container for XmlNodes with positional insert."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any

_INDEX_RE = re.compile(r'^#(\d+)$')


class NodeContainer:
    """Ordered container for XmlNodes with positional insert.

    NodeContainer combines dict-like access with list-like ordering. Elements
    can be accessed by label, numeric index, or '#n' string index. Document
    order matters in XML, so insertion can target the beginning, the end, or
    a position relative to an existing label.

    Note:
        Elements are expected to expose `.label` and `.attr` (as XmlNode does).

    Internal structure:
        _dict: maps label -> node (for O(1) lookup by label)
        _list: contains nodes in document order
    """

    def __init__(self) -> None:
        self._dict: dict[str, Any] = {}
        self._list: list[Any] = []

    def index(self, label: str) -> int:
        """Return the index of a label in this container.

        Args:
            label: A label, '#n', or '?attr=value' to match the first node
                whose attribute equals value.

        Returns:
            Index position (0-based), or -1 if not found.
        """
        if label in self._dict:
            return next((i for i, node in enumerate(self._list) if node.label == label), -1)
        if m := _INDEX_RE.match(label):
            idx = int(m.group(1))
            return idx if idx < len(self._list) else -1
        if label.startswith('?') and '=' in label:
            attr, value = label[1:].split('=', 1)
            return next((i for i, node in enumerate(self._list) if node.attr.get(attr) == value), -1)
        return -1

    def _parse_position(self, position: str | int | None) -> int:
        """Parse position syntax and return insertion index.

        Args:
            position: Position specification. Supported formats:
                - None or '>': append at end
                - '<': insert at beginning
                - int: insert at this index (clamped to valid range)
                - '#n': insert at index n
                - '<label': insert before label
                - '>label': insert after label

        Returns:
            Index where to insert (always valid for list.insert).
        """
        size = len(self._list)
        if position is None or position == '>':
            return size

        if isinstance(position, int):
            return max(0, min(position, size))

        if position == '<':
            return 0

        if position.startswith('#'):
            try:
                return max(0, min(int(position[1:]), size))
            except ValueError:
                return size

        if position.startswith('<'):
            idx = self.index(position[1:])
            return idx if idx >= 0 else size

        if position.startswith('>'):
            idx = self.index(position[1:])
            return idx + 1 if idx >= 0 else size

        return size

    def __getitem__(self, key: str | int) -> Any:
        """Get node by label, index, '#n' or '?attr=value'."""
        if isinstance(key, str) and key in self._dict:
            return self._dict[key]
        if not isinstance(key, int):
            key = self.index(key)
        if 0 <= key < len(self._list):
            return self._list[key]
        return None

    def __contains__(self, key: str) -> bool:
        return key in self._dict

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._list)

    def set(self, key: str, node: Any, _position: str | int | None = '>') -> None:
        """Store a node under key, inserting it at the requested position.

        An existing label is replaced in place and keeps its position.
        """
        if key in self._dict:
            idx = self._list.index(self._dict[key])
            self._list[idx] = node
        else:
            self._list.insert(self._parse_position(_position), node)
        self._dict[key] = node

    def keys(self) -> list[str]:
        return [node.label for node in self._list]
