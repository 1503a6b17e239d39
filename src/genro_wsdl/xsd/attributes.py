# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Attribute declarations, attribute wildcards and attribute groups."""

from __future__ import annotations

from typing import Any

from ..enums import XsdType
from ..validations import process_contents as check_process_contents


class Attribute:
    """An ``<attribute>`` declaration with optional use/default/fixed/form."""

    def __init__(self, name: str, type: XsdType | str, parent: Any = None) -> None:
        self._name = name
        self._type = type
        self._parent = parent
        self._use: str | None = None
        self._default: str | None = None
        self._fixed: str | None = None
        self._form: str | None = None

    def use(self, use: str) -> Attribute:
        """Set ``use`` (optional, required, prohibited)."""
        self._use = use
        return self

    def default(self, value: str) -> Attribute:
        self._default = value
        return self

    def fixed(self, value: str) -> Attribute:
        self._fixed = value
        return self

    def form(self, form: str) -> Attribute:
        """Set ``form`` (qualified, unqualified)."""
        self._form = form
        return self

    def end(self) -> Any:
        return self._parent

    def get_name(self) -> str:
        return self._name

    def get_type(self) -> XsdType | str:
        return self._type

    def get_use(self) -> str | None:
        return self._use

    def get_default(self) -> str | None:
        return self._default

    def get_fixed(self) -> str | None:
        return self._fixed

    def get_form(self) -> str | None:
        return self._form


class AnyAttribute:
    """An ``<anyAttribute>`` wildcard."""

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._namespace = '##any'
        self._process_contents = 'strict'

    def namespace(self, namespace: str) -> AnyAttribute:
        self._namespace = namespace
        return self

    def process_contents(self, mode: str) -> AnyAttribute:
        """Set processContents. Raises InvalidArgumentException unless strict, lax or skip."""
        self._process_contents = check_process_contents(mode)
        return self

    def end(self) -> Any:
        return self._parent

    def get_namespace(self) -> str:
        return self._namespace

    def get_process_contents(self) -> str:
        return self._process_contents


class AttributeGroup:
    """A named ``<attributeGroup>``: attributes plus an optional wildcard."""

    def __init__(self, parent: Any, name: str) -> None:
        self._parent = parent
        self._name = name
        self._attributes: list[Attribute] = []
        self._any_attribute: AnyAttribute | None = None

    def attribute(self, name: str, type: XsdType | str) -> Attribute:
        attribute = Attribute(name, type, parent=self)
        self._attributes.append(attribute)
        return attribute

    def any_attribute(self) -> AnyAttribute:
        """Create the wildcard, replacing any previous one."""
        self._any_attribute = AnyAttribute(parent=self)
        return self._any_attribute

    def end(self) -> Any:
        return self._parent

    def get_name(self) -> str:
        return self._name

    def get_attributes(self) -> tuple[Attribute, ...]:
        return tuple(self._attributes)

    def get_any_attribute(self) -> AnyAttribute | None:
        return self._any_attribute
