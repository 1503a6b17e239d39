# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Simple types derived by list and by union."""

from __future__ import annotations

from typing import Any

from ..enums import XsdType


class ListType:
    """``<simpleType><list itemType>``, optionally wrapped in a restriction.

    When any facet is set the generator nests the list inside
    ``<restriction><simpleType>`` and emits the facets after it.
    """

    def __init__(self, parent: Any, name: str) -> None:
        self._parent = parent
        self._name = name
        self._item_type: XsdType | str = XsdType.STRING
        self._min_length: int | None = None
        self._max_length: int | None = None
        self._pattern: str | None = None
        self._enumeration: list[str] = []

    def item_type(self, type: XsdType | str) -> ListType:
        self._item_type = type
        return self

    def min_length(self, length: int) -> ListType:
        self._min_length = length
        return self

    def max_length(self, length: int) -> ListType:
        self._max_length = length
        return self

    def pattern(self, regex: str) -> ListType:
        self._pattern = regex
        return self

    def enumeration(self, *values: str) -> ListType:
        self._enumeration.extend(values)
        return self

    def end(self) -> Any:
        return self._parent

    def get_name(self) -> str:
        return self._name

    def get_item_type(self) -> XsdType | str:
        return self._item_type

    def get_min_length(self) -> int | None:
        return self._min_length

    def get_max_length(self) -> int | None:
        return self._max_length

    def get_pattern(self) -> str | None:
        return self._pattern

    def get_enumeration(self) -> tuple[str, ...]:
        return tuple(self._enumeration)

    def has_restrictions(self) -> bool:
        return (
            self._min_length is not None
            or self._max_length is not None
            or self._pattern is not None
            or bool(self._enumeration)
        )


class UnionType:
    """``<simpleType><union memberTypes>``."""

    def __init__(self, parent: Any, name: str) -> None:
        self._parent = parent
        self._name = name
        self._member_types: list[XsdType | str] = []

    def member_types(self, *types: XsdType | str) -> UnionType:
        """Set the member types, replacing any previous list."""
        self._member_types = list(types)
        return self

    def end(self) -> Any:
        return self._parent

    def get_name(self) -> str:
        return self._name

    def get_member_types(self) -> tuple[XsdType | str, ...]:
        return tuple(self._member_types)
