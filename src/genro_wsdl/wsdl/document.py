# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Wsdl - the WSDL 1.1 document builder.

A Wsdl is created once with ``Wsdl.create(name, target_namespace)`` and
then populated through factory methods. Each factory registers the new
component under its name and returns it; the component's ``end()``
returns the document, so a whole service reads as one chain:

    >>> xml = (
    ...     Wsdl.create('Calculator', 'http://example.com/calc')
    ...     .operation('Add')
    ...         .input('a', XsdType.INT)
    ...         .input('b', XsdType.INT)
    ...         .output('result', XsdType.INT)
    ...     .end()
    ...     .service('CalculatorService')
    ...         .port('CalculatorPort', 'CalculatorBinding', 'http://example.com/calc')
    ...     .end()
    ...     .build()
    ... )

Names are unique per category and a repeated name replaces the earlier
component. References between components (a binding's portType, a
port's binding) are plain names and are not checked.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..enums import BindingStyle, BindingUse, SoapVersion
from ..extensions.policy import PolicyAttachment
from ..imports import SchemaRedefine, WsdlImport
from ..schema_registry import SchemaRegistry, register
from ..validations import EnumValue
from .binding import Binding, binding_style
from .generator import WsdlGenerator
from .message import Message
from .operations import Notification, OneWay, Operation
from .port_type import PortType
from .service import Service
from .soap import binding_use

if TYPE_CHECKING:
    from ..xml_tree import XmlTree

logger = logging.getLogger(__name__)

soap_version = EnumValue(SoapVersion)


class Wsdl(PolicyAttachment, SchemaRegistry):
    """WSDL 1.1 document builder."""

    schema_prefix = 'xsd'

    def __init__(self, name: str, target_namespace: str) -> None:
        PolicyAttachment.__init__(self)
        SchemaRegistry.__init__(self, name, target_namespace)
        self._soap_version = SoapVersion.SOAP_11
        self._default_style = BindingStyle.DOCUMENT
        self._default_use = BindingUse.LITERAL
        self._messages: dict[str, Message] = {}
        self._port_types: dict[str, PortType] = {}
        self._bindings: dict[str, Binding] = {}
        self._services: dict[str, Service] = {}
        self._wsdl_imports: list[WsdlImport] = []
        self._redefines: list[SchemaRedefine] = []

    @classmethod
    def create(cls, name: str, target_namespace: str) -> Wsdl:
        logger.debug('Creating WSDL 1.1 document %r (%s)', name, target_namespace)
        return cls(name, target_namespace)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def soap_version(self, version: SoapVersion | str) -> Wsdl:
        self._soap_version = soap_version(version)
        return self

    def default_style(self, style: BindingStyle | str) -> Wsdl:
        """Style for bindings created after this call."""
        self._default_style = binding_style(style)
        return self

    def default_use(self, use: BindingUse | str) -> Wsdl:
        """Use for bindings created after this call."""
        self._default_use = binding_use(use)
        return self

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    def message(self, name: str) -> Message:
        return register(self._messages, name, Message(self, name), 'message')

    def port_type(self, name: str) -> PortType:
        return register(self._port_types, name, PortType(self, name), 'portType')

    def binding(self, name: str, port_type: str) -> Binding:
        return register(self._bindings, name, Binding(self, name, port_type), 'binding')

    def service(self, name: str) -> Service:
        return register(self._services, name, Service(self, name), 'service')

    def operation(self, name: str) -> Operation:
        return Operation(self, name)

    def one_way(self, name: str) -> OneWay:
        return OneWay(self, name)

    def notification(self, name: str) -> Notification:
        return Notification(self, name)

    def redefine(self, schema_location: str) -> SchemaRedefine:
        redefine = SchemaRedefine(self, schema_location)
        self._redefines.append(redefine)
        return redefine

    def wsdl_import(self, namespace: str, location: str) -> Wsdl:
        self._wsdl_imports.append(WsdlImport(namespace, location))
        return self

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_soap_version(self) -> SoapVersion:
        return self._soap_version

    def get_soap_namespace(self) -> str:
        return self._soap_version.namespace()

    def get_default_style(self) -> BindingStyle:
        return self._default_style

    def get_default_use(self) -> BindingUse:
        return self._default_use

    def get_messages(self) -> MappingProxyType[str, Message]:
        return MappingProxyType(self._messages)

    def get_port_types(self) -> MappingProxyType[str, PortType]:
        return MappingProxyType(self._port_types)

    def get_bindings(self) -> MappingProxyType[str, Binding]:
        return MappingProxyType(self._bindings)

    def get_services(self) -> MappingProxyType[str, Service]:
        return MappingProxyType(self._services)

    def get_imports(self) -> tuple[WsdlImport, ...]:
        return tuple(self._wsdl_imports)

    def get_redefines(self) -> tuple[SchemaRedefine, ...]:
        return tuple(self._redefines)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def build(self, pretty: bool = True, filename: str | None = None, encoding: str = 'UTF-8') -> str | None:
        """Generate the WSDL XML text (or write it to ``filename`` and return None)."""
        return WsdlGenerator(self).generate(pretty=pretty, filename=filename, encoding=encoding)

    def build_tree(self) -> XmlTree:
        """Generate the document as an XmlTree."""
        return WsdlGenerator(self).generate_tree()
