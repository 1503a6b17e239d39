# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WsdlGenerator - render a Wsdl document as an XmlTree and as XML text.

Document order:
    1. ``<wsdl:definitions>`` with its namespace declarations
    2. documentation, document policies, document policy references
    3. imports, types, messages, portTypes, bindings, services

Namespaces other than wsdl, tns and xsd are declared on the root only
when some component uses them (see ``declared_namespaces``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..enums import enum_text
from ..namespaces import (
    HTTP_BINDING_NS,
    MIME_NS,
    SP_NS,
    WELL_KNOWN_PREFIXES,
    WSAW_NS,
    WSDL_NS,
    WSP_NS,
    XSD_NS,
)
from ..xml_tree import XmlTree
from ..xsd.writer import SchemaWriter

if TYPE_CHECKING:
    from ..documentation import Documentation
    from ..extensions.addressing import Action
    from ..extensions.mime import MimeMultipartRelated
    from ..extensions.policy import Policy, PolicyAssertion, PolicyAttachment, PolicyOperator
    from ..xml_node import XmlNode
    from .binding import Binding, BindingOperation
    from .document import Wsdl
    from .message import Message
    from .port_type import PortType
    from .service import Service

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="{encoding}"?>'


class WsdlGenerator:
    """Render a Wsdl.

    Args:
        wsdl: The document to render.
    """

    def __init__(self, wsdl: Wsdl) -> None:
        self.wsdl = wsdl
        self.schema = SchemaWriter('xsd')
        self.namespaces: dict[str, str] = {}

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def generate(self, pretty: bool = True, filename: str | None = None, encoding: str = 'UTF-8') -> str | None:
        """Return the document as XML text, or write it to ``filename`` and return None."""
        tree = self.generate_tree()
        return tree.to_xml(
            filename=filename,
            encoding=encoding,
            doc_header=XML_DECLARATION.format(encoding=encoding),
            pretty=pretty,
        )

    def generate_tree(self) -> XmlTree:
        wsdl = self.wsdl
        logger.debug('Generating WSDL 1.1 document %r', wsdl.get_name())
        self.namespaces = self.declared_namespaces()

        tree = XmlTree()
        root = tree.child(
            'wsdl:definitions',
            attributes={
                'xmlns:wsdl': WSDL_NS,
                'name': wsdl.get_name(),
                'targetNamespace': wsdl.get_target_namespace(),
                **{f'xmlns:{prefix}': uri for prefix, uri in self.namespaces.items() if prefix != 'wsdl'},
            },
        )
        self.write_documentation(root, wsdl.get_documentation())
        self.write_policy_attachments(root, wsdl)

        for wsdl_import in wsdl.get_imports():
            root.child('wsdl:import', namespace=wsdl_import.namespace, location=wsdl_import.location)
        if wsdl.has_schema_content():
            wsdl.write_schema(root.child('wsdl:types'))
        for message in wsdl.get_messages().values():
            self.write_message(root, message)
        for port_type in wsdl.get_port_types().values():
            self.write_port_type(root, port_type)
        for binding in wsdl.get_bindings().values():
            self.write_binding(root, binding)
        for service in wsdl.get_services().values():
            self.write_service(root, service)

        logger.debug('Generated WSDL 1.1 document %r', wsdl.get_name())
        return tree

    # -------------------------------------------------------------------------
    # Namespaces
    # -------------------------------------------------------------------------

    def declared_namespaces(self) -> dict[str, str]:
        """Prefix to URI map of the root declarations, in emission order."""
        wsdl = self.wsdl
        bindings = list(wsdl.get_bindings().values())
        services = list(wsdl.get_services().values())
        port_types = list(wsdl.get_port_types().values())
        operations = [op for binding in bindings for op in binding.get_operations().values()]
        attachables: list[PolicyAttachment] = [wsdl, *bindings, *operations, *services]

        namespaces = {
            'wsdl': WSDL_NS,
            'tns': wsdl.get_target_namespace(),
            'xsd': XSD_NS,
        }
        if any(not b.is_http() for b in bindings) or any(s.get_ports() for s in services):
            namespaces['soap'] = wsdl.get_soap_namespace()
        if any(a.has_policy_attachments() for a in attachables):
            namespaces['wsp'] = WSP_NS
        if any(c.uses_addressing() for c in (*bindings, *port_types)):
            namespaces['wsaw'] = WSAW_NS
        if any(p.has_assertion_in(SP_NS) for a in attachables for p in a.get_policies()):
            namespaces['sp'] = SP_NS
        if any(op.has_mime() for op in operations):
            namespaces['mime'] = MIME_NS
        if any(b.is_http() for b in bindings):
            namespaces['http'] = HTTP_BINDING_NS
        return namespaces

    # -------------------------------------------------------------------------
    # Documentation and policies
    # -------------------------------------------------------------------------

    def write_documentation(self, parent: XmlNode, documentation: Documentation | None) -> XmlNode | None:
        """Insert ``<wsdl:documentation>`` as the first child of ``parent``."""
        if documentation is None:
            return None
        return parent.child(
            'wsdl:documentation',
            documentation.content,
            attributes={'xml:lang': documentation.lang},
            node_position='<',
            source=documentation.source,
        )

    def write_policy_attachments(self, parent: XmlNode, attachable: PolicyAttachment) -> None:
        for policy in attachable.get_policies():
            self.write_policy(parent, policy)
        for reference in attachable.get_policy_references():
            parent.child(
                'wsp:PolicyReference',
                URI=reference.uri,
                Digest=reference.digest,
                DigestAlgorithm=reference.digest_algorithm,
            )

    def write_policy(self, parent: XmlNode, policy: Policy) -> XmlNode:
        """``<wsp:Policy>``: operators, then assertions, then references."""
        node = parent.child('wsp:Policy', attributes={'xml:id': policy.get_id()}, Name=policy.get_name())
        for operator in policy.get_operators():
            self.write_policy_operator(node, operator)
        for assertion in policy.get_assertions():
            self.write_policy_assertion(node, assertion)
        for reference in policy.get_references():
            node.child('wsp:PolicyReference', URI=reference.uri)
        return node

    def write_policy_operator(self, parent: XmlNode, operator: PolicyOperator) -> XmlNode:
        tag = 'wsp:All' if operator.get_type() == 'all' else 'wsp:ExactlyOne'
        node = parent.child(tag)
        for nested in operator.get_nested_operators():
            self.write_policy_operator(node, nested)
        for assertion in operator.get_assertions():
            self.write_policy_assertion(node, assertion)
        for policy in operator.get_nested_policies():
            self.write_policy(node, policy)
        return node

    def write_policy_assertion(self, parent: XmlNode, assertion: PolicyAssertion) -> XmlNode:
        """Render an assertion, declaring its namespace locally when the root does not."""
        tag, declaration = self.assertion_name(assertion)
        attributes = dict(declaration)
        attributes.update(self.attribute_declarations(assertion.attributes or {}, attributes))
        attributes.update(assertion.attributes or {})
        return parent.child(tag, attributes=attributes)

    def attribute_declarations(self, attributes: dict, declared: dict[str, str]) -> dict[str, str]:
        """Declarations for well-known attribute prefixes the root does not declare."""
        known = {prefix: uri for uri, prefix in WELL_KNOWN_PREFIXES.items()}
        result: dict[str, str] = {}
        for name in attributes:
            prefix, sep, _ = name.partition(':')
            if not sep or prefix in ('xml', 'xmlns') or prefix in self.namespaces:
                continue
            key = f'xmlns:{prefix}'
            if key not in declared and prefix in known:
                result[key] = known[prefix]
        return result

    def assertion_name(self, assertion: PolicyAssertion) -> tuple[str, dict[str, str]]:
        """Return the qualified element name and any local namespace declaration."""
        prefix = assertion.prefix
        if prefix is not None:
            if self.namespaces.get(prefix) == assertion.namespace:
                return assertion.local_name, {}
            return assertion.local_name, {f'xmlns:{prefix}': assertion.namespace}
        for declared, uri in self.namespaces.items():
            if uri == assertion.namespace and declared != 'tns':
                return f'{declared}:{assertion.local_name}', {}
        known = WELL_KNOWN_PREFIXES.get(assertion.namespace)
        if known is not None:
            return f'{known}:{assertion.local_name}', {f'xmlns:{known}': assertion.namespace}
        return assertion.local_name, {'xmlns': assertion.namespace}

    # -------------------------------------------------------------------------
    # Messages and portTypes
    # -------------------------------------------------------------------------

    def write_message(self, parent: XmlNode, message: Message) -> XmlNode:
        node = parent.child('wsdl:message', name=message.get_name())
        self.write_documentation(node, message.get_documentation())
        for part in message.get_parts():
            if part.is_element:
                node.child('wsdl:part', name=part.name, element=part.type)
            else:
                node.child('wsdl:part', name=part.name, type=self.schema.type_ref(part.type))
        return node

    def write_port_type(self, parent: XmlNode, port_type: PortType) -> XmlNode:
        node = parent.child(
            'wsdl:portType',
            attributes={
                'name': port_type.get_name(),
                'wsaw:UsingAddressing': 'true' if port_type.is_using_addressing() else None,
            },
        )
        self.write_documentation(node, port_type.get_documentation())
        actions = port_type.get_actions()
        for operation in port_type.get_operations().values():
            op_node = node.child('wsdl:operation', name=operation.name)
            action = actions.get(operation.name)
            if operation.input is not None:
                input_node = op_node.child('wsdl:input', message=f'tns:{operation.input}')
                if action is not None:
                    input_node.child('wsaw:Action', action.input_action)
            if operation.output is not None:
                output_node = op_node.child('wsdl:output', message=f'tns:{operation.output}')
                if action is not None and action.output_action is not None:
                    output_node.child('wsaw:Action', action.output_action)
            if operation.fault is not None:
                fault_node = op_node.child(
                    'wsdl:fault', name=operation.fault, message=f'tns:{operation.fault}'
                )
                self._write_fault_action(fault_node, action, operation.fault)
        return node

    def _write_fault_action(self, fault_node: XmlNode, action: Action | None, fault_name: str) -> None:
        if action is None:
            return
        uri = action.fault_actions.get(fault_name)
        if uri is not None:
            fault_node.child('wsaw:Action', uri)

    # -------------------------------------------------------------------------
    # Bindings
    # -------------------------------------------------------------------------

    def write_binding(self, parent: XmlNode, binding: Binding) -> XmlNode:
        node = parent.child(
            'wsdl:binding',
            attributes={
                'name': binding.get_name(),
                'type': f'tns:{binding.get_port_type()}',
                'wsaw:UsingAddressing': 'required' if binding.is_using_addressing() else None,
            },
        )
        self.write_documentation(node, binding.get_documentation())
        self.write_policy_attachments(node, binding)

        http_binding = binding.get_http_binding()
        if http_binding is not None:
            node.child('http:binding', verb=http_binding.verb)
            for operation in binding.get_operations().values():
                self.write_http_operation(node, operation)
        else:
            node.child(
                'soap:binding',
                style=binding.get_style().value,
                transport=binding.get_transport(),
            )
            for operation in binding.get_operations().values():
                self.write_soap_operation(node, operation)
        return node

    def write_http_operation(self, parent: XmlNode, operation: BindingOperation) -> XmlNode:
        node = parent.child('wsdl:operation', name=operation.name)
        http_operation = operation.get_http_operation()
        if http_operation is not None:
            node.child('http:operation', location=http_operation.location)
        input_node = node.child('wsdl:input')
        if operation.get_http_url_encoded() is not None:
            input_node.child('http:urlEncoded')
        elif operation.get_http_url_replacement() is not None:
            input_node.child('http:urlReplacement')
        node.child('wsdl:output')
        return node

    def write_soap_operation(self, parent: XmlNode, operation: BindingOperation) -> XmlNode:
        node = parent.child('wsdl:operation', name=operation.name)
        self.write_policy_attachments(node, operation)
        node.child('soap:operation', soapAction=operation.soap_action, style=operation.style.value)

        input_node = node.child('wsdl:input')
        for header in operation.get_headers():
            header_node = input_node.child(
                'soap:header',
                attributes={
                    'message': f'tns:{header.get_message()}',
                    'part': header.get_part(),
                    'use': header.get_use().value,
                    'namespace': header.get_namespace(),
                    'encodingStyle': header.get_encoding_style(),
                    'wsdl:required': 'true' if header.is_required() else None,
                },
            )
            for fault in header.get_header_faults():
                header_node.child(
                    'soap:headerfault',
                    message=f'tns:{fault.get_message()}',
                    part=fault.get_part(),
                    use=fault.get_use().value,
                    namespace=fault.get_namespace(),
                    encodingStyle=fault.get_encoding_style(),
                )
        self._write_body(input_node, operation.get_input_mime(), operation)

        output_node = node.child('wsdl:output')
        self._write_body(output_node, operation.get_output_mime(), operation)
        return node

    def _write_body(
        self, parent: XmlNode, mime: MimeMultipartRelated | None, operation: BindingOperation
    ) -> None:
        if mime is not None:
            self.write_mime_multipart(parent, mime)
        else:
            parent.child('soap:body', use=enum_text(operation.use))

    def write_mime_multipart(self, parent: XmlNode, multipart: MimeMultipartRelated) -> XmlNode:
        node = parent.child('mime:multipartRelated')
        for part in multipart.get_parts():
            part_node = node.child('mime:part', name=part.get_name())
            content = part.get_mime_content()
            if content is not None:
                part_node.child('mime:content', part=content.part, type=content.type)
            if part.has_soap_body():
                part_node.child('soap:body', use='literal')
        return node

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    def write_service(self, parent: XmlNode, service: Service) -> XmlNode:
        node = parent.child('wsdl:service', name=service.get_name())
        self.write_documentation(node, service.get_documentation())
        self.write_policy_attachments(node, service)
        for port in service.get_ports().values():
            port_node = node.child('wsdl:port', name=port.name, binding=f'tns:{port.binding}')
            port_node.child('soap:address', location=port.address)
        return node
