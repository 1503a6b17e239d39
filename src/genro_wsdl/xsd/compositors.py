# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Content-model compositors: choice, all and the element wildcard.

Compositors are owned by a ComplexType or an ElementGroup; ``end()``
returns that owner. ``All`` enforces the XSD 1.0 cardinality rule on its
members at the moment each element is added.
"""

from __future__ import annotations

from ..enums import DerivationControl, XsdType
from ..validations import all_max_occurs, all_min_occurs
from ..validations import process_contents as check_process_contents
from .element import Element


class Choice:
    """``<choice>``: exactly one of the contained elements."""

    def __init__(self, parent: object) -> None:
        self._parent = parent
        self._elements: list[Element] = []
        self._min_occurs: int | None = None
        self._max_occurs: int | None = None

    def element(
        self,
        name: str,
        type: XsdType | str,
        nullable: bool = False,
        min_occurs: int | None = None,
        max_occurs: int | None = None,
        substitution_group: str | None = None,
        block: DerivationControl | str | None = None,
    ) -> Choice:
        self._elements.append(
            Element(name, type, nullable, min_occurs, max_occurs, substitution_group, block)
        )
        return self

    def min_occurs(self, value: int) -> Choice:
        self._min_occurs = value
        return self

    def max_occurs(self, value: int) -> Choice:
        """Set maxOccurs (-1 for unbounded)."""
        self._max_occurs = value
        return self

    def end(self) -> object:
        return self._parent

    def get_elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def get_min_occurs(self) -> int | None:
        return self._min_occurs

    def get_max_occurs(self) -> int | None:
        return self._max_occurs


class All:
    """``<all>``: every element at most once, in any order.

    Members may only have minOccurs 0 or 1 and maxOccurs 1 (None means the
    schema default, which is 1 for both).
    """

    def __init__(self, parent: object) -> None:
        self._parent = parent
        self._elements: list[Element] = []

    def element(
        self,
        name: str,
        type: XsdType | str,
        nullable: bool = False,
        min_occurs: int | None = None,
        max_occurs: int | None = None,
    ) -> All:
        """Add a member element.

        Raises:
            InvalidArgumentException: If min_occurs is not 0/1 or max_occurs is not 1.
        """
        all_min_occurs(min_occurs)
        all_max_occurs(max_occurs)
        self._elements.append(Element(name, type, nullable, min_occurs, max_occurs))
        return self

    def end(self) -> object:
        return self._parent

    def get_elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)


class Any:
    """``<any>``: element wildcard."""

    def __init__(self, parent: object) -> None:
        self._parent = parent
        self._namespace = '##any'
        self._process_contents = 'strict'
        self._min_occurs: int | None = None
        self._max_occurs: int | None = None

    def namespace(self, namespace: str) -> Any:
        """Set the namespace constraint (##any, ##other, ##local, ##targetNamespace or URIs)."""
        self._namespace = namespace
        return self

    def process_contents(self, mode: str) -> Any:
        """Set processContents.

        Raises:
            InvalidArgumentException: Unless mode is strict, lax or skip.
        """
        self._process_contents = check_process_contents(mode)
        return self

    def min_occurs(self, value: int) -> Any:
        self._min_occurs = value
        return self

    def max_occurs(self, value: int) -> Any:
        self._max_occurs = value
        return self

    def end(self) -> object:
        return self._parent

    def get_namespace(self) -> str:
        return self._namespace

    def get_process_contents(self) -> str:
        return self._process_contents

    def get_min_occurs(self) -> int | None:
        return self._min_occurs

    def get_max_occurs(self) -> int | None:
        return self._max_occurs
