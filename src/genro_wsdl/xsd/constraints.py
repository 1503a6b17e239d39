# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Identity constraints: key, keyref and unique.

Each constraint owns at most one selector (overwritable) and an ordered
list of fields. XPath expressions are stored verbatim and never evaluated.
"""

from __future__ import annotations

from typing import Any


class Selector:
    """``<selector xpath>``; ``field()`` adds a field to the owning constraint."""

    def __init__(self, xpath: str, constraint: IdentityConstraint) -> None:
        self._xpath = xpath
        self._constraint = constraint

    def field(self, xpath: str) -> Selector:
        self._constraint.field(xpath)
        return self

    def end(self) -> IdentityConstraint:
        return self._constraint

    def get_xpath(self) -> str:
        return self._xpath


class Field:
    """``<field xpath>``."""

    def __init__(self, xpath: str, constraint: IdentityConstraint) -> None:
        self._xpath = xpath
        self._constraint = constraint

    def end(self) -> IdentityConstraint:
        return self._constraint

    def get_xpath(self) -> str:
        return self._xpath


class IdentityConstraint:
    """Common selector/field handling for Key, KeyRef and Unique."""

    tag = ''

    def __init__(self, parent: Any, name: str) -> None:
        self._parent = parent
        self._name = name
        self._selector: Selector | None = None
        self._fields: list[Field] = []

    def selector(self, xpath: str) -> Selector:
        """Set the selector (replaces any previous one) and return it."""
        self._selector = Selector(xpath, self)
        return self._selector

    def field(self, xpath: str) -> IdentityConstraint:
        self._fields.append(Field(xpath, self))
        return self

    def end(self) -> Any:
        return self._parent

    def get_name(self) -> str:
        return self._name

    def get_selector(self) -> Selector | None:
        return self._selector

    def get_fields(self) -> tuple[Field, ...]:
        return tuple(self._fields)


class Key(IdentityConstraint):
    tag = 'key'


class Unique(IdentityConstraint):
    tag = 'unique'


class KeyRef(IdentityConstraint):
    """``<keyref>``: references a key or unique constraint by name (not validated)."""

    tag = 'keyref'

    def __init__(self, parent: Any, name: str) -> None:
        super().__init__(parent, name)
        self._refer: str | None = None

    def refer(self, name: str) -> KeyRef:
        self._refer = name
        return self

    def get_refer(self) -> str | None:
        return self._refer
