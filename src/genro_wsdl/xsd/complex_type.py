# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""ComplexType - the main XSD container builder.

A complex type gathers, in creation order:
    - elements (rendered inside a ``<sequence>`` together with group refs)
    - compositors (choice, all, any), rendered after the sequence
    - attributes, attribute group refs and an optional attribute wildcard
    - identity constraints (key, keyref, unique)

Alternatively it may hold a ``<simpleContent>``; in that case only the
simple-content branch is emitted even if elements or attributes were
also added.

Example:
    >>> wsdl.complex_type('Address') \\
    ...     .element('street', XsdType.STRING) \\
    ...     .element('line', XsdType.STRING, max_occurs=-1) \\
    ...     .end()
"""

from __future__ import annotations

from typing import Any

from ..documentation import Documented
from ..enums import DerivationControl, XsdType
from .annotations import Annotation
from .attributes import AnyAttribute, Attribute
from .compositors import All, Choice
from .compositors import Any as AnyWildcard
from .constraints import Key, KeyRef, Unique
from .element import Element
from .simple_content import SimpleContent

Compositor = Choice | All | AnyWildcard


class ComplexType(Documented):
    """``<complexType>`` builder."""

    def __init__(self, parent: Any, name: str) -> None:
        self._parent = parent
        self._name = name
        self._elements: list[Element] = []
        self._extends: str | None = None
        self._abstract = False
        self._mixed = False
        self._attributes: list[Attribute] = []
        self._attribute_group_refs: list[str] = []
        self._group_refs: list[str] = []
        self._any_attribute: AnyAttribute | None = None
        self._compositors: list[Compositor] = []
        self._keys: list[Key] = []
        self._key_refs: list[KeyRef] = []
        self._uniques: list[Unique] = []
        self._simple_content: SimpleContent | None = None
        self._annotation: Annotation | None = None
        self._block: DerivationControl | str | None = None
        self._final: DerivationControl | str | None = None

    # -------------------------------------------------------------------------
    # Content model
    # -------------------------------------------------------------------------

    def element(
        self,
        name: str,
        type: XsdType | str,
        nullable: bool = False,
        min_occurs: int | None = None,
        max_occurs: int | None = None,
        substitution_group: str | None = None,
        block: DerivationControl | str | None = None,
    ) -> ComplexType:
        """Append an element to the type's sequence.

        Args:
            name: Element name.
            type: XsdType or qualified type name.
            nullable: Render ``nillable="true"``.
            min_occurs: Lower bound (omitted when None).
            max_occurs: Upper bound (omitted when None, -1 for unbounded).
            substitution_group: Head element name.
            block: Blocked derivations.
        """
        self._elements.append(
            Element(name, type, nullable, min_occurs, max_occurs, substitution_group, block)
        )
        return self

    def extends(self, type_name: str) -> ComplexType:
        """Derive by extension from another complex type of this schema."""
        self._extends = type_name
        return self

    def group(self, ref: str) -> ComplexType:
        """Reference a named element group from the sequence."""
        self._group_refs.append(ref)
        return self

    def choice(self) -> Choice:
        choice = Choice(self)
        self._compositors.append(choice)
        return choice

    def all(self) -> All:
        all_ = All(self)
        self._compositors.append(all_)
        return all_

    def any(self) -> AnyWildcard:
        wildcard = AnyWildcard(self)
        self._compositors.append(wildcard)
        return wildcard

    def simple_content(self) -> SimpleContent:
        self._simple_content = SimpleContent(self)
        return self._simple_content

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def attribute(self, name: str, type: XsdType | str) -> Attribute:
        attribute = Attribute(name, type, parent=self)
        self._attributes.append(attribute)
        return attribute

    def attribute_group(self, ref: str) -> ComplexType:
        self._attribute_group_refs.append(ref)
        return self

    def any_attribute(self) -> AnyAttribute:
        self._any_attribute = AnyAttribute(parent=self)
        return self._any_attribute

    # -------------------------------------------------------------------------
    # Identity constraints
    # -------------------------------------------------------------------------

    def key(self, name: str) -> Key:
        key = Key(self, name)
        self._keys.append(key)
        return key

    def key_ref(self, name: str) -> KeyRef:
        key_ref = KeyRef(self, name)
        self._key_refs.append(key_ref)
        return key_ref

    def unique(self, name: str) -> Unique:
        unique = Unique(self, name)
        self._uniques.append(unique)
        return unique

    # -------------------------------------------------------------------------
    # Flags and annotations
    # -------------------------------------------------------------------------

    def abstract(self, abstract: bool = True) -> ComplexType:
        self._abstract = abstract
        return self

    def mixed(self, mixed: bool = True) -> ComplexType:
        self._mixed = mixed
        return self

    def block(self, block: DerivationControl | str | None) -> ComplexType:
        self._block = block
        return self

    def final(self, final: DerivationControl | str | None) -> ComplexType:
        self._final = final
        return self

    def annotation(self) -> Annotation:
        """Return the type's annotation block, creating it on first call."""
        if self._annotation is None:
            self._annotation = Annotation(self)
        return self._annotation

    def end(self) -> Any:
        return self._parent

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_name(self) -> str:
        return self._name

    def get_elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def get_extends(self) -> str | None:
        return self._extends

    def is_abstract(self) -> bool:
        return self._abstract

    def is_mixed(self) -> bool:
        return self._mixed

    def get_attributes(self) -> tuple[Attribute, ...]:
        return tuple(self._attributes)

    def get_attribute_group_refs(self) -> tuple[str, ...]:
        return tuple(self._attribute_group_refs)

    def get_group_refs(self) -> tuple[str, ...]:
        return tuple(self._group_refs)

    def get_any_attribute(self) -> AnyAttribute | None:
        return self._any_attribute

    def get_compositors(self) -> tuple[Compositor, ...]:
        return tuple(self._compositors)

    def get_keys(self) -> tuple[Key, ...]:
        return tuple(self._keys)

    def get_key_refs(self) -> tuple[KeyRef, ...]:
        return tuple(self._key_refs)

    def get_uniques(self) -> tuple[Unique, ...]:
        return tuple(self._uniques)

    def get_simple_content(self) -> SimpleContent | None:
        return self._simple_content

    def get_annotation(self) -> Annotation | None:
        return self._annotation

    def get_block(self) -> DerivationControl | str | None:
        return self._block

    def get_final(self) -> DerivationControl | str | None:
        return self._final
