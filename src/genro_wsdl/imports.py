# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""External document references: WSDL imports, schema imports, includes and redefines."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .xsd.attributes import AttributeGroup
from .xsd.complex_type import ComplexType
from .xsd.groups import ElementGroup
from .xsd.simple_type import SimpleType


@dataclass(frozen=True)
class WsdlImport:
    """``<wsdl:import namespace location>``."""

    namespace: str
    location: str


@dataclass(frozen=True)
class SchemaImport:
    """``<xsd:import namespace schemaLocation?>``."""

    namespace: str
    schema_location: str | None = None


@dataclass(frozen=True)
class SchemaInclude:
    """``<xsd:include schemaLocation>``."""

    schema_location: str


class SchemaRedefine:
    """``<xsd:redefine schemaLocation>`` with the components it overrides.

    Components created here belong to the document: their ``end()``
    returns the owning Wsdl, not the redefine block.
    """

    def __init__(self, document: Any, schema_location: str) -> None:
        self._document = document
        self._schema_location = schema_location
        self._simple_types: dict[str, SimpleType] = {}
        self._complex_types: dict[str, ComplexType] = {}
        self._attribute_groups: dict[str, AttributeGroup] = {}
        self._groups: dict[str, ElementGroup] = {}

    def simple_type(self, name: str) -> SimpleType:
        simple_type = SimpleType(self._document, name)
        self._simple_types[name] = simple_type
        return simple_type

    def complex_type(self, name: str) -> ComplexType:
        complex_type = ComplexType(self._document, name)
        self._complex_types[name] = complex_type
        return complex_type

    def attribute_group(self, name: str) -> AttributeGroup:
        group = AttributeGroup(self._document, name)
        self._attribute_groups[name] = group
        return group

    def group(self, name: str) -> ElementGroup:
        group = ElementGroup(self._document, name)
        self._groups[name] = group
        return group

    def end(self) -> Any:
        return self._document

    def get_schema_location(self) -> str:
        return self._schema_location

    def get_simple_types(self) -> MappingProxyType[str, SimpleType]:
        return MappingProxyType(self._simple_types)

    def get_complex_types(self) -> MappingProxyType[str, ComplexType]:
        return MappingProxyType(self._complex_types)

    def get_attribute_groups(self) -> MappingProxyType[str, AttributeGroup]:
        return MappingProxyType(self._attribute_groups)

    def get_groups(self) -> MappingProxyType[str, ElementGroup]:
        return MappingProxyType(self._groups)
