# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Wsdl2Generator - render a Wsdl2 document.

Document order: ``<wsdl:description>``, documentation, types (``xs:``
prefix), interfaces, bindings, services. ``xmlns:wsoap`` is declared only
when a binding has a protocol or an operation with a soapAction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..namespaces import WSDL2_NS, WSDL2_SOAP_NS, XSD_NS
from ..wsdl.generator import XML_DECLARATION
from ..xml_tree import XmlTree

if TYPE_CHECKING:
    from ..documentation import Documentation
    from ..xml_node import XmlNode
    from .binding import Binding2
    from .document import Wsdl2
    from .interface import Interface, InterfaceOperation
    from .service import Service2

logger = logging.getLogger(__name__)


class Wsdl2Generator:
    def __init__(self, wsdl: Wsdl2) -> None:
        self.wsdl = wsdl

    def generate(self, pretty: bool = True, filename: str | None = None, encoding: str = 'UTF-8') -> str | None:
        return self.generate_tree().to_xml(
            filename=filename,
            encoding=encoding,
            doc_header=XML_DECLARATION.format(encoding=encoding),
            pretty=pretty,
        )

    def generate_tree(self) -> XmlTree:
        wsdl = self.wsdl
        logger.debug('Generating WSDL 2.0 document %r', wsdl.get_name())
        uses_soap = any(b.uses_soap() for b in wsdl.get_bindings().values())

        tree = XmlTree()
        root = tree.child(
            'wsdl:description',
            attributes={
                'xmlns:wsdl': WSDL2_NS,
                'targetNamespace': wsdl.get_target_namespace(),
                'xmlns:tns': wsdl.get_target_namespace(),
                'xmlns:xs': XSD_NS,
                'xmlns:wsoap': WSDL2_SOAP_NS if uses_soap else None,
            },
        )
        self.write_documentation(root, wsdl.get_documentation())
        if wsdl.has_schema_content():
            wsdl.write_schema(root.child('wsdl:types'))
        for interface in wsdl.get_interfaces().values():
            self.write_interface(root, interface)
        for binding in wsdl.get_bindings().values():
            self.write_binding(root, binding)
        for service in wsdl.get_services().values():
            self.write_service(root, service)

        logger.debug('Generated WSDL 2.0 document %r', wsdl.get_name())
        return tree

    def write_documentation(self, parent: XmlNode, documentation: Documentation | None) -> XmlNode | None:
        if documentation is None:
            return None
        return parent.child(
            'wsdl:documentation',
            documentation.content,
            attributes={'xml:lang': documentation.lang},
            node_position='<',
            source=documentation.source,
        )

    def write_interface(self, parent: XmlNode, interface: Interface) -> XmlNode:
        extends = ' '.join(f'tns:{name}' for name in interface.get_extends())
        node = parent.child('wsdl:interface', name=interface.get_name(), extends=extends or None)
        self.write_documentation(node, interface.get_documentation())
        for fault in interface.get_faults().values():
            node.child('wsdl:fault', name=fault.name, element=f'tns:{fault.element}')
        for operation in interface.get_operations().values():
            self.write_interface_operation(node, operation)
        return node

    def write_interface_operation(self, parent: XmlNode, operation: InterfaceOperation) -> XmlNode:
        node = parent.child(
            'wsdl:operation',
            name=operation.get_name(),
            pattern=operation.get_pattern(),
            style=operation.get_style(),
            safe='true' if operation.is_safe() else None,
        )
        self.write_documentation(node, operation.get_documentation())
        if operation.get_input() is not None:
            node.child('wsdl:input', element=f'tns:{operation.get_input()}')
        if operation.get_output() is not None:
            node.child('wsdl:output', element=f'tns:{operation.get_output()}')
        for ref in operation.get_faults():
            node.child('wsdl:outfault', ref=f'tns:{ref}')
        return node

    def write_binding(self, parent: XmlNode, binding: Binding2) -> XmlNode:
        node = parent.child(
            'wsdl:binding',
            attributes={
                'name': binding.get_name(),
                'interface': f'tns:{binding.get_interface_ref()}',
                'type': binding.get_type(),
                'wsoap:protocol': binding.get_protocol(),
            },
        )
        self.write_documentation(node, binding.get_documentation())
        for operation in binding.get_operations().values():
            op_node = node.child('wsdl:operation', ref=f'tns:{operation.get_ref()}')
            self.write_documentation(op_node, operation.get_documentation())
            if operation.get_soap_action() is not None:
                op_node.child('wsoap:operation', soapAction=operation.get_soap_action())
        for fault in binding.get_faults().values():
            fault_node = node.child('wsdl:fault', ref=f'tns:{fault.get_ref()}')
            self.write_documentation(fault_node, fault.get_documentation())
        return node

    def write_service(self, parent: XmlNode, service: Service2) -> XmlNode:
        node = parent.child(
            'wsdl:service',
            name=service.get_name(),
            interface=f'tns:{service.get_interface_ref()}' if service.get_interface_ref() else None,
        )
        self.write_documentation(node, service.get_documentation())
        for endpoint in service.get_endpoints().values():
            endpoint_node = node.child(
                'wsdl:endpoint',
                name=endpoint.get_name(),
                binding=f'tns:{endpoint.get_binding()}',
                address=endpoint.get_address(),
            )
            self.write_documentation(endpoint_node, endpoint.get_documentation())
        return node
