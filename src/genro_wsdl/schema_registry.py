# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""SchemaRegistry - the inline schema held by WSDL 1.1 and WSDL 2.0 documents.

Each category of named declaration lives in its own dict, so names only
need to be unique within a category. Registering a name twice replaces
the earlier declaration (last write wins); the replacement is logged at
debug level and otherwise silent.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, TypeVar

from .documentation import Documented
from .imports import SchemaImport, SchemaInclude
from .xsd.attributes import AttributeGroup
from .xsd.complex_type import ComplexType
from .xsd.derived_types import ListType, UnionType
from .xsd.groups import ElementGroup
from .xsd.simple_type import SimpleType
from .xsd.writer import SchemaWriter

logger = logging.getLogger(__name__)

T = TypeVar('T')


def register(store: dict[str, T], name: str, item: T, kind: str) -> T:
    """Store ``item`` under ``name``, replacing any previous entry."""
    if name in store:
        logger.debug('Replacing %s %r', kind, name)
    else:
        logger.debug('Registering %s %r', kind, name)
    store[name] = item
    return item


class SchemaRegistry(Documented):
    """Type factories and schema references shared by both document kinds.

    Subclasses set ``schema_prefix`` to the prefix they bind to the XML
    Schema namespace.
    """

    schema_prefix = 'xsd'

    def __init__(self, name: str, target_namespace: str) -> None:
        self._name = name
        self._target_namespace = target_namespace
        self._simple_types: dict[str, SimpleType] = {}
        self._complex_types: dict[str, ComplexType] = {}
        self._element_groups: dict[str, ElementGroup] = {}
        self._attribute_groups: dict[str, AttributeGroup] = {}
        self._list_types: dict[str, ListType] = {}
        self._union_types: dict[str, UnionType] = {}
        self._schema_imports: list[SchemaImport] = []
        self._schema_includes: list[SchemaInclude] = []

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    def simple_type(self, name: str) -> SimpleType:
        return register(self._simple_types, name, SimpleType(self, name), 'simpleType')

    def complex_type(self, name: str) -> ComplexType:
        return register(self._complex_types, name, ComplexType(self, name), 'complexType')

    def element_group(self, name: str) -> ElementGroup:
        return register(self._element_groups, name, ElementGroup(self, name), 'group')

    def attribute_group(self, name: str) -> AttributeGroup:
        return register(self._attribute_groups, name, AttributeGroup(self, name), 'attributeGroup')

    def list_type(self, name: str) -> ListType:
        return register(self._list_types, name, ListType(self, name), 'list type')

    def union_type(self, name: str) -> UnionType:
        return register(self._union_types, name, UnionType(self, name), 'union type')

    def schema_import(self, namespace: str, schema_location: str | None = None):
        self._schema_imports.append(SchemaImport(namespace, schema_location))
        return self

    def schema_include(self, schema_location: str):
        self._schema_includes.append(SchemaInclude(schema_location))
        return self

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_name(self) -> str:
        return self._name

    def get_target_namespace(self) -> str:
        return self._target_namespace

    def get_simple_types(self) -> MappingProxyType[str, SimpleType]:
        return MappingProxyType(self._simple_types)

    def get_complex_types(self) -> MappingProxyType[str, ComplexType]:
        return MappingProxyType(self._complex_types)

    def get_element_groups(self) -> MappingProxyType[str, ElementGroup]:
        return MappingProxyType(self._element_groups)

    def get_attribute_groups(self) -> MappingProxyType[str, AttributeGroup]:
        return MappingProxyType(self._attribute_groups)

    def get_list_types(self) -> MappingProxyType[str, ListType]:
        return MappingProxyType(self._list_types)

    def get_union_types(self) -> MappingProxyType[str, UnionType]:
        return MappingProxyType(self._union_types)

    def get_schema_imports(self) -> tuple[SchemaImport, ...]:
        return tuple(self._schema_imports)

    def get_schema_includes(self) -> tuple[SchemaInclude, ...]:
        return tuple(self._schema_includes)

    def get_redefines(self) -> tuple[Any, ...]:
        return ()

    # -------------------------------------------------------------------------
    # Schema output
    # -------------------------------------------------------------------------

    def has_schema_content(self) -> bool:
        """True if the document needs a ``<types>`` section."""
        return any((
            self._simple_types,
            self._complex_types,
            self._list_types,
            self._union_types,
            self._element_groups,
            self._attribute_groups,
            self._schema_imports,
            self._schema_includes,
            self.get_redefines(),
        ))

    def write_schema(self, types_node: Any) -> Any:
        """Append the inline schema under a ``<types>`` node."""
        return SchemaWriter(self.schema_prefix).write_schema(
            types_node,
            self._target_namespace,
            imports=self._schema_imports,
            includes=self._schema_includes,
            redefines=self.get_redefines(),
            element_groups=self._element_groups.values(),
            attribute_groups=self._attribute_groups.values(),
            simple_types=self._simple_types.values(),
            list_types=self._list_types.values(),
            union_types=self._union_types.values(),
            complex_types=self._complex_types.values(),
        )
