# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Named model groups (``<group>``)."""

from __future__ import annotations

from typing import Any

from ..enums import XsdType
from .compositors import All, Choice
from .element import Element


class ElementGroup:
    """A reusable model group.

    The group renders as a choice, an all, or a plain sequence of its
    elements, in that order of preference. ``choice()`` and ``all()`` are
    mutually exclusive: the later call replaces the earlier one.
    """

    def __init__(self, parent: Any, name: str) -> None:
        self._parent = parent
        self._name = name
        self._elements: list[Element] = []
        self._choice: Choice | None = None
        self._all: All | None = None

    def element(
        self,
        name: str,
        type: XsdType | str,
        nullable: bool = False,
        min_occurs: int | None = None,
        max_occurs: int | None = None,
    ) -> ElementGroup:
        self._elements.append(Element(name, type, nullable, min_occurs, max_occurs))
        return self

    def choice(self) -> Choice:
        self._choice = Choice(self)
        self._all = None
        return self._choice

    def all(self) -> All:
        self._all = All(self)
        self._choice = None
        return self._all

    def end(self) -> Any:
        return self._parent

    def get_name(self) -> str:
        return self._name

    def get_elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def get_choice(self) -> Choice | None:
        return self._choice

    def get_all(self) -> All | None:
        return self._all
