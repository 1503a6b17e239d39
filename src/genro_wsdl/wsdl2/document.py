# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Wsdl2 - the WSDL 2.0 document builder.

Same schema factories as the WSDL 1.1 builder (without redefines), with
interfaces in place of messages and portTypes:

    >>> xml = (
    ...     Wsdl2.create('Weather', 'http://example.com/weather')
    ...     .interface('WeatherInterface')
    ...         .operation('GetForecast')
    ...             .pattern(MessageExchangePattern.IN_OUT)
    ...             .input('GetForecastRequest')
    ...             .output('GetForecastResponse')
    ...         .end()
    ...     .end()
    ...     .build()
    ... )
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..schema_registry import SchemaRegistry, register
from .binding import Binding2
from .generator import Wsdl2Generator
from .interface import Interface
from .service import Service2

if TYPE_CHECKING:
    from ..xml_tree import XmlTree

logger = logging.getLogger(__name__)


class Wsdl2(SchemaRegistry):
    """WSDL 2.0 document builder."""

    schema_prefix = 'xs'

    def __init__(self, name: str, target_namespace: str) -> None:
        super().__init__(name, target_namespace)
        self._interfaces: dict[str, Interface] = {}
        self._bindings: dict[str, Binding2] = {}
        self._services: dict[str, Service2] = {}

    @classmethod
    def create(cls, name: str, target_namespace: str) -> Wsdl2:
        logger.debug('Creating WSDL 2.0 document %r (%s)', name, target_namespace)
        return cls(name, target_namespace)

    def interface(self, name: str) -> Interface:
        return register(self._interfaces, name, Interface(self, name), 'interface')

    def binding(self, name: str, interface_ref: str) -> Binding2:
        return register(self._bindings, name, Binding2(self, name, interface_ref), 'binding')

    def service(self, name: str) -> Service2:
        return register(self._services, name, Service2(self, name), 'service')

    def get_interfaces(self) -> MappingProxyType[str, Interface]:
        return MappingProxyType(self._interfaces)

    def get_bindings(self) -> MappingProxyType[str, Binding2]:
        return MappingProxyType(self._bindings)

    def get_services(self) -> MappingProxyType[str, Service2]:
        return MappingProxyType(self._services)

    def build(self, pretty: bool = True, filename: str | None = None, encoding: str = 'UTF-8') -> str | None:
        """Generate the WSDL 2.0 XML text (or write it to ``filename`` and return None)."""
        return Wsdl2Generator(self).generate(pretty=pretty, filename=filename, encoding=encoding)

    def build_tree(self) -> XmlTree:
        return Wsdl2Generator(self).generate_tree()
