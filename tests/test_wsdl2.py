# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for the WSDL 2.0 builders and generator."""

from genro_wsdl import MessageExchangePattern, XsdType
from genro_wsdl.namespaces import WSDL2_NS, WSDL2_SOAP_NS, XSD_NS

SOAP12_HTTP = 'http://www.w3.org/2003/05/soap/bindings/HTTP/'


def user_service(wsdl2):
    """Interface, SOAP binding and service for a user lookup."""
    wsdl2.complex_type('GetUser').element('id', XsdType.INT).end()
    wsdl2.interface('UserInterface') \
        .fault('NotFound', 'NotFoundError') \
        .operation('GetUser') \
        .pattern(MessageExchangePattern.IN_OUT) \
        .input('GetUser') \
        .output('GetUserResponse') \
        .fault('NotFound') \
        .safe() \
        .end() \
        .end()
    wsdl2.binding('UserSoapBinding', 'UserInterface') \
        .type(WSDL2_SOAP_NS) \
        .protocol(SOAP12_HTTP) \
        .operation('GetUser').soap_action('urn:GetUser').end() \
        .fault('NotFound').end() \
        .end()
    wsdl2.service('UserService') \
        .interface('UserInterface') \
        .endpoint('UserEndpoint', 'UserSoapBinding', 'http://example.com/users').end() \
        .end()
    return wsdl2


class TestBuilders:
    """Component builders and getters."""

    def test_interface(self, wsdl2):
        """Operations and faults are keyed by name."""
        user_service(wsdl2)
        interface = wsdl2.get_interfaces()['UserInterface']
        operation = interface.get_operations()['GetUser']
        assert operation.get_pattern() == 'http://www.w3.org/ns/wsdl/in-out'
        assert operation.get_faults() == ('NotFound',)
        assert operation.is_safe()
        assert interface.get_faults()['NotFound'].element == 'NotFoundError'

    def test_extends_accumulates(self, wsdl2):
        """Each extends() call adds a base interface."""
        interface = wsdl2.interface('Child').extends('Base').extends('Mixin')
        assert interface.get_extends() == ('Base', 'Mixin')

    def test_binding_soap_detection(self, wsdl2):
        """A binding needs wsoap when it has a protocol or a soapAction."""
        plain = wsdl2.binding('Plain', 'I')
        assert not plain.uses_soap()
        plain.operation('Op').soap_action('urn:op')
        assert plain.uses_soap()
        assert wsdl2.binding('Proto', 'I').protocol(SOAP12_HTTP).uses_soap()

    def test_last_write_wins(self, wsdl2):
        """A repeated interface name replaces the earlier one."""
        wsdl2.interface('I').operation('A').end().end()
        wsdl2.interface('I').end()
        assert wsdl2.get_interfaces()['I'].get_operations() == {}

    def test_service(self, wsdl2):
        """Endpoints keep their binding and address."""
        user_service(wsdl2)
        service = wsdl2.get_services()['UserService']
        assert service.get_interface_ref() == 'UserInterface'
        endpoint = service.get_endpoints()['UserEndpoint']
        assert (endpoint.get_binding(), endpoint.get_address()) == ('UserSoapBinding', 'http://example.com/users')


class TestGenerator:
    """Rendering of wsdl:description."""

    def test_minimal_root(self, wsdl2, root_of):
        """Without SOAP bindings wsoap is not declared."""
        root = root_of(wsdl2)
        assert root.tag == 'wsdl:description'
        assert list(root.attr.items()) == [
            ('xmlns:wsdl', WSDL2_NS),
            ('targetNamespace', 'http://example.com/test'),
            ('xmlns:tns', 'http://example.com/test'),
            ('xmlns:xs', XSD_NS),
        ]

    def test_wsoap_declared(self, wsdl2, root_of):
        """A SOAP binding declares wsoap."""
        assert root_of(user_service(wsdl2)).attr['xmlns:wsoap'] == WSDL2_SOAP_NS

    def test_section_order(self, wsdl2, root_of):
        """documentation, types, interfaces, bindings, services."""
        user_service(wsdl2).documentation('Users')
        assert root_of(wsdl2).digest('#t') == [
            'wsdl:documentation',
            'wsdl:types',
            'wsdl:interface',
            'wsdl:binding',
            'wsdl:service',
        ]

    def test_types_use_xs_prefix(self, wsdl2, root_of):
        """The inline schema uses xs: and built-in types are xs-qualified."""
        user_service(wsdl2)
        schema = root_of(wsdl2).get_node('wsdl:types_0.xs:schema_0')
        assert schema is not None
        element = schema.get_node('xs:complexType_0.xs:sequence_0.xs:element_0')
        assert element.attr == {'name': 'id', 'type': 'xs:int'}

    def test_facets_are_value_attributes(self, wsdl2):
        """Restriction facets render as empty xs: elements with a value attribute."""
        wsdl2.list_type('Codes').item_type(XsdType.STRING).max_length(5).end()
        xml = user_service(wsdl2).build(pretty=False)
        assert '<xs:maxLength value="5"/>' in xml
        assert '<xs:maxLength>' not in xml

    def test_interface(self, wsdl2, root_of):
        """Interface faults precede operations; operations carry pattern and safe."""
        user_service(wsdl2)
        wsdl2.get_interfaces()['UserInterface'].extends('Base').extends('Audit')
        interface = root_of(wsdl2).get_node('wsdl:interface_0')
        assert interface.attr == {'name': 'UserInterface', 'extends': 'tns:Base tns:Audit'}
        assert interface.digest('#t') == ['wsdl:fault', 'wsdl:operation']
        assert interface.get_node('wsdl:fault_0').attr == {'name': 'NotFound', 'element': 'tns:NotFoundError'}
        operation = interface.get_node('wsdl:operation_0')
        assert operation.attr == {
            'name': 'GetUser',
            'pattern': 'http://www.w3.org/ns/wsdl/in-out',
            'safe': 'true',
        }
        assert operation.digest('#t,#a.element,#a.ref') == [
            ('wsdl:input', 'tns:GetUser', None),
            ('wsdl:output', 'tns:GetUserResponse', None),
            ('wsdl:outfault', None, 'tns:NotFound'),
        ]

    def test_binding(self, wsdl2, root_of):
        """Bindings render type, protocol, operations and faults."""
        user_service(wsdl2)
        binding = root_of(wsdl2).get_node('wsdl:binding_0')
        assert binding.attr == {
            'name': 'UserSoapBinding',
            'interface': 'tns:UserInterface',
            'type': WSDL2_SOAP_NS,
            'wsoap:protocol': SOAP12_HTTP,
        }
        operation = binding.get_node('wsdl:operation_0')
        assert operation.attr == {'ref': 'tns:GetUser'}
        assert operation.get_node('wsoap:operation_0').attr == {'soapAction': 'urn:GetUser'}
        assert binding.get_node('wsdl:fault_0').attr == {'ref': 'tns:NotFound'}

    def test_service(self, wsdl2, root_of):
        """Endpoints carry binding, address and documentation."""
        user_service(wsdl2)
        wsdl2.get_services()['UserService'].get_endpoints()['UserEndpoint'].documentation('Primary')
        service = root_of(wsdl2).get_node('wsdl:service_0')
        assert service.attr == {'name': 'UserService', 'interface': 'tns:UserInterface'}
        endpoint = service.get_node('wsdl:endpoint_0')
        assert endpoint.attr == {
            'name': 'UserEndpoint',
            'binding': 'tns:UserSoapBinding',
            'address': 'http://example.com/users',
        }
        assert endpoint.get_node('wsdl:documentation_0').text == 'Primary'

    def test_service_without_interface(self, wsdl2, root_of):
        """The interface attribute is optional."""
        wsdl2.service('Bare').end()
        assert root_of(wsdl2).get_node('wsdl:service_0').attr == {'name': 'Bare'}

    def test_build(self, wsdl2):
        """build() returns pretty XML with the declaration."""
        xml = user_service(wsdl2).build()
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<wsdl:description')
        assert '\n  <wsdl:interface name="UserInterface">' in xml

    def test_build_to_file(self, wsdl2, tmp_path):
        """build(filename=...) writes the file and returns None."""
        target = tmp_path / 'service.wsdl'
        assert wsdl2.build(pretty=False, filename=str(target)) is None
        assert target.read_bytes().startswith(b'<?xml version="1.0" encoding="UTF-8"?>\n<wsdl:description')
