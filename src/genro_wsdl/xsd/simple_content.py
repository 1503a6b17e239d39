# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""``<simpleContent>``: complex types with text content plus attributes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..enums import XsdType
from .attributes import Attribute

if TYPE_CHECKING:
    from .complex_type import ComplexType

EXTENSION = 'extension'
RESTRICTION = 'restriction'


class SimpleContent:
    """Derivation of a simple base type, by extension or by restriction.

    The derivation kind and its base are one unit: calling ``extension()``
    or ``restriction()`` again replaces both. Attributes accumulate
    independently, whether added before or after the derivation.
    """

    def __init__(self, parent: ComplexType) -> None:
        self._parent = parent
        self._base: XsdType | str | None = None
        self._derivation_type: str | None = None
        self._attributes: list[Attribute] = []

    def extension(self, base: XsdType | str) -> SimpleContent:
        self._base = base
        self._derivation_type = EXTENSION
        return self

    def restriction(self, base: XsdType | str) -> SimpleContent:
        self._base = base
        self._derivation_type = RESTRICTION
        return self

    def attribute(self, name: str, type: XsdType | str) -> SimpleContent:
        self._attributes.append(Attribute(name, type, parent=self))
        return self

    def end(self) -> ComplexType:
        return self._parent

    def get_base(self) -> XsdType | str | None:
        return self._base

    def get_derivation_type(self) -> str | None:
        return self._derivation_type

    def get_attributes(self) -> tuple[Attribute, ...]:
        return tuple(self._attributes)
