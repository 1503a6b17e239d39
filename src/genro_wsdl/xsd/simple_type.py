# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Named simple types defined by restriction of a base type."""

from __future__ import annotations

from typing import Any

from ..documentation import Documented
from ..enums import DerivationControl, XsdType

Bound = int | float | str


class SimpleType(Documented):
    """``<simpleType>`` with a ``<restriction>`` and its facets.

    The base defaults to xsd:string. Facets left unset are omitted from
    output; ``enumeration()`` appends to the running list of values.
    """

    def __init__(self, parent: Any, name: str) -> None:
        self._parent = parent
        self._name = name
        self._base: XsdType | str = XsdType.STRING
        self._min_length: int | None = None
        self._max_length: int | None = None
        self._pattern: str | None = None
        self._enumeration: list[str] = []
        self._min_inclusive: str | None = None
        self._max_inclusive: str | None = None
        self._min_exclusive: str | None = None
        self._max_exclusive: str | None = None
        self._final: DerivationControl | str | None = None

    def base(self, type: XsdType | str) -> SimpleType:
        self._base = type
        return self

    def min_length(self, length: int) -> SimpleType:
        self._min_length = length
        return self

    def max_length(self, length: int) -> SimpleType:
        self._max_length = length
        return self

    def pattern(self, regex: str) -> SimpleType:
        self._pattern = regex
        return self

    def enumeration(self, *values: str) -> SimpleType:
        self._enumeration.extend(values)
        return self

    def min_inclusive(self, value: Bound) -> SimpleType:
        self._min_inclusive = str(value)
        return self

    def max_inclusive(self, value: Bound) -> SimpleType:
        self._max_inclusive = str(value)
        return self

    def min_exclusive(self, value: Bound) -> SimpleType:
        self._min_exclusive = str(value)
        return self

    def max_exclusive(self, value: Bound) -> SimpleType:
        self._max_exclusive = str(value)
        return self

    def final(self, final: DerivationControl | str | None) -> SimpleType:
        self._final = final
        return self

    def end(self) -> Any:
        return self._parent

    def get_name(self) -> str:
        return self._name

    def get_base(self) -> XsdType | str:
        return self._base

    def get_min_length(self) -> int | None:
        return self._min_length

    def get_max_length(self) -> int | None:
        return self._max_length

    def get_pattern(self) -> str | None:
        return self._pattern

    def get_enumeration(self) -> tuple[str, ...]:
        return tuple(self._enumeration)

    def get_min_inclusive(self) -> str | None:
        return self._min_inclusive

    def get_max_inclusive(self) -> str | None:
        return self._max_inclusive

    def get_min_exclusive(self) -> str | None:
        return self._min_exclusive

    def get_max_exclusive(self) -> str | None:
        return self._max_exclusive

    def get_final(self) -> DerivationControl | str | None:
        return self._final
