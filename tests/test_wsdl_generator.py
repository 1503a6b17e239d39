# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for WSDL 1.1 rendering: root declarations, sections, bindings, policies and output."""

import pytest

from genro_wsdl import Wsdl, XsdType
from genro_wsdl.extensions import PolicyAssertion
from genro_wsdl.namespaces import (
    HTTP_BINDING_NS,
    MIME_NS,
    SP_NS,
    WSAT_NS,
    WSAW_NS,
    WSDL_NS,
    WSP_NS,
    WSU_NS,
    XSD_NS,
)
from genro_wsdl.wsdl import WsdlGenerator

SOAP_11_NS = 'http://schemas.xmlsoap.org/wsdl/soap/'
SOAP_12_NS = 'http://schemas.xmlsoap.org/wsdl/soap12/'


def simple_service(wsdl):
    """A one-operation SOAP service."""
    return wsdl.operation('GetUser') \
        .input('userId', XsdType.INT) \
        .output('name', XsdType.STRING) \
        .end() \
        .service('UserService') \
        .port('UserPort', 'TestServiceBinding', 'http://example.com/users') \
        .end()


class TestRootElement:
    """Root element and namespace declarations."""

    def test_minimal_root(self, wsdl, root_of):
        """An empty document declares only wsdl, tns and xsd."""
        root = root_of(wsdl)
        assert root.tag == 'wsdl:definitions'
        assert list(root.attr.items()) == [
            ('xmlns:wsdl', WSDL_NS),
            ('name', 'TestService'),
            ('targetNamespace', 'http://example.com/test'),
            ('xmlns:tns', 'http://example.com/test'),
            ('xmlns:xsd', XSD_NS),
        ]
        assert root.children == []

    def test_soap_declared_for_soap_bindings(self, wsdl, root_of):
        """A SOAP binding brings in the soap prefix."""
        wsdl.binding('B', 'PT').end()
        assert root_of(wsdl).attr['xmlns:soap'] == SOAP_11_NS

    def test_soap_12(self, wsdl, root_of):
        """SOAP 1.2 documents bind soap to the soap12 namespace."""
        simple_service(wsdl.soap_version('1.2'))
        assert root_of(wsdl).attr['xmlns:soap'] == SOAP_12_NS

    def test_http_only_document(self, wsdl, root_of):
        """An HTTP binding declares http but not soap."""
        wsdl.binding('B', 'PT').http_binding('GET').end()
        attr = root_of(wsdl).attr
        assert attr['xmlns:http'] == HTTP_BINDING_NS
        assert 'xmlns:soap' not in attr

    def test_conditional_namespaces(self, wsdl):
        """wsp, wsaw, sp and mime follow the features in use."""
        wsdl.port_type('PT').action('Op', 'urn:in').end()
        wsdl.binding('B', 'PT') \
            .operation('Op', 'urn:op') \
            .input_mime().soap_body_part().end() \
            .operation_policy('OpPolicy').assertion(SP_NS, 'sp:TransportBinding').end() \
            .end()
        namespaces = WsdlGenerator(wsdl).declared_namespaces()
        assert list(namespaces) == ['wsdl', 'tns', 'xsd', 'soap', 'wsp', 'wsaw', 'sp', 'mime']
        assert namespaces['wsp'] == WSP_NS
        assert namespaces['wsaw'] == WSAW_NS
        assert namespaces['mime'] == MIME_NS

    def test_wsp_without_sp(self, wsdl):
        """Policies without security assertions do not declare sp."""
        wsdl.policy('P').assertion(WSAT_NS, 'wsat:ATAssertion').end()
        namespaces = WsdlGenerator(wsdl).declared_namespaces()
        assert 'wsp' in namespaces
        assert 'sp' not in namespaces


class TestSections:
    """Section order and content."""

    def test_section_order(self, wsdl, root_of):
        """documentation, imports, types, messages, portTypes, bindings, services."""
        simple_service(wsdl)
        wsdl.wsdl_import('urn:other', 'other.wsdl')
        wsdl.documentation('User lookup', lang='en')
        assert [child.tag for child in root_of(wsdl).children] == [
            'wsdl:documentation',
            'wsdl:import',
            'wsdl:types',
            'wsdl:message',
            'wsdl:message',
            'wsdl:portType',
            'wsdl:binding',
            'wsdl:service',
        ]

    def test_documentation(self, wsdl, root_of):
        """Documentation carries xml:lang and source."""
        wsdl.documentation('Hello', lang='en', source='http://docs')
        node = root_of(wsdl).get_node('wsdl:documentation_0')
        assert node.text == 'Hello'
        assert node.attr == {'xml:lang': 'en', 'source': 'http://docs'}

    def test_documentation_goes_first_in_components(self, wsdl, root_of):
        """Component documentation precedes the component's children."""
        wsdl.message('M').part('x', XsdType.INT).documentation('A message').end()
        message = root_of(wsdl).get_node('wsdl:message_0')
        assert [child.tag for child in message.children] == ['wsdl:documentation', 'wsdl:part']

    def test_message_parts(self, wsdl, root_of):
        """Element parts use element=, type parts use type=."""
        wsdl.message('M').part('parameters', 'tns:Request').part('count', XsdType.INT).end()
        message = root_of(wsdl).get_node('wsdl:message_0')
        assert message.attr['name'] == 'M'
        assert message.digest('#a.name,#a.element,#a.type') == [
            ('parameters', 'tns:Request', None),
            ('count', None, 'xsd:int'),
        ]

    def test_port_type_operations(self, wsdl, root_of):
        """Only the messages present are emitted."""
        wsdl.port_type('PT') \
            .operation('Full', 'In', 'Out', 'Err') \
            .operation('OneWay', 'In', None) \
            .end()
        port_type = root_of(wsdl).get_node('wsdl:portType_0')
        full = port_type.get_node('?name=Full')
        assert full.digest('#t,#a.message') == [
            ('wsdl:input', 'tns:In'),
            ('wsdl:output', 'tns:Out'),
            ('wsdl:fault', 'tns:Err'),
        ]
        assert full.get_node('wsdl:fault_0').attr['name'] == 'Err'
        assert port_type.get_node('?name=OneWay').digest('#t') == ['wsdl:input']

    def test_service_ports(self, wsdl, root_of):
        """Ports carry a soap:address."""
        simple_service(wsdl)
        port = root_of(wsdl).get_node('wsdl:service_0.wsdl:port_0')
        assert port.attr == {'name': 'UserPort', 'binding': 'tns:TestServiceBinding'}
        assert port.get_node('soap:address_0').attr['location'] == 'http://example.com/users'


class TestSoapBinding:
    """SOAP binding details."""

    def test_binding_structure(self, wsdl, root_of):
        """soap:binding, then operations with soap:operation and literal bodies."""
        simple_service(wsdl)
        binding = root_of(wsdl).get_node('wsdl:binding_0')
        assert binding.attr == {'name': 'TestServiceBinding', 'type': 'tns:TestServicePortType'}
        assert binding.get_node('soap:binding_0').attr == {
            'style': 'document',
            'transport': 'http://schemas.xmlsoap.org/soap/http',
        }
        operation = binding.get_node('wsdl:operation_0')
        assert operation.get_node('soap:operation_0').attr == {
            'soapAction': 'http://example.com/test/GetUser',
            'style': 'document',
        }
        assert operation.get_node('wsdl:input_0.soap:body_0').attr == {'use': 'literal'}
        assert operation.get_node('wsdl:output_0.soap:body_0').attr == {'use': 'literal'}

    def test_headers(self, wsdl, root_of):
        """Headers and header faults render inside the input."""
        binding = wsdl.binding('B', 'PT').operation('Op', 'urn:op')
        binding.header('AuthHeader', 'token', namespace='urn:auth')
        binding.get_operations()['Op'].get_headers()[0].required()
        binding.header_fault('AuthFault', 'detail', 'encoded')
        header = root_of(wsdl).get_node('wsdl:binding_0.wsdl:operation_0.wsdl:input_0.soap:header_0')
        assert header.attr == {
            'message': 'tns:AuthHeader',
            'part': 'token',
            'use': 'literal',
            'namespace': 'urn:auth',
            'wsdl:required': 'true',
        }
        assert header.get_node('soap:headerfault_0').attr == {
            'message': 'tns:AuthFault',
            'part': 'detail',
            'use': 'encoded',
        }

    def test_mime(self, wsdl, root_of):
        """A MIME input replaces the plain soap:body."""
        wsdl.binding('B', 'PT') \
            .operation('Upload', 'urn:upload') \
            .input_mime().soap_body_part().mime_part('file', 'image/png').end() \
            .end()
        input_node = root_of(wsdl).get_node('wsdl:binding_0.wsdl:operation_0.wsdl:input_0')
        assert input_node.digest('#t') == ['mime:multipartRelated']
        parts = input_node.get_node('mime:multipartRelated_0')
        assert parts.get_node('mime:part_0.soap:body_0').attr == {'use': 'literal'}
        assert parts.get_node('mime:part_1.mime:content_0').attr == {'part': 'file', 'type': 'image/png'}


class TestHttpBinding:
    """HTTP GET/POST bindings."""

    def test_http_binding(self, wsdl, root_of):
        """http:binding, http:operation and the input encoding."""
        wsdl.binding('HttpB', 'PT') \
            .http_binding('GET') \
            .operation('Find', '') \
            .http_operation('/find') \
            .http_url_encoded() \
            .operation('Show', '') \
            .http_operation('/show/(id)') \
            .http_url_replacement() \
            .end()
        binding = root_of(wsdl).get_node('wsdl:binding_0')
        assert binding.get_node('http:binding_0').attr == {'verb': 'GET'}
        find = binding.get_node('?name=Find')
        assert find.digest('#t') == ['http:operation', 'wsdl:input', 'wsdl:output']
        assert find.get_node('http:operation_0').attr['location'] == '/find'
        assert find.get_node('wsdl:input_0').digest('#t') == ['http:urlEncoded']
        show = binding.get_node('?name=Show')
        assert show.get_node('wsdl:input_0').digest('#t') == ['http:urlReplacement']


class TestAddressing:
    """WS-Addressing attributes and action elements."""

    def test_using_addressing(self, wsdl, root_of):
        """portTypes say 'true', bindings say 'required'."""
        wsdl.port_type('PT').using_addressing().end()
        wsdl.binding('B', 'PT').using_addressing().end()
        root = root_of(wsdl)
        assert root.get_node('wsdl:portType_0').attr['wsaw:UsingAddressing'] == 'true'
        assert root.get_node('wsdl:binding_0').attr['wsaw:UsingAddressing'] == 'required'

    def test_actions(self, wsdl, root_of):
        """Actions render under input, output and fault."""
        wsdl.operation('Pay') \
            .input('amount', XsdType.DECIMAL) \
            .output('ok', XsdType.BOOLEAN) \
            .fault('reason', XsdType.STRING) \
            .action('urn:pay', 'urn:payResponse') \
            .fault_action('PayFault', 'urn:payFault') \
            .end()
        operation = root_of(wsdl).get_node('wsdl:portType_0.wsdl:operation_0')
        assert operation.get_node('wsdl:input_0.wsaw:Action_0').text == 'urn:pay'
        assert operation.get_node('wsdl:output_0.wsaw:Action_0').text == 'urn:payResponse'
        assert operation.get_node('wsdl:fault_0.wsaw:Action_0').text == 'urn:payFault'


class TestPolicies:
    """Policy rendering and assertion naming."""

    def test_document_policy(self, wsdl, root_of):
        """Policies render with xml:id and Name, followed by references."""
        wsdl.policy('Main', 'urn:main').all().assertion(SP_NS, 'sp:TransportBinding').end().end()
        wsdl.policy_reference('#Other')
        root = root_of(wsdl)
        policy = root.get_node('wsp:Policy_0')
        assert policy.attr == {'xml:id': 'Main', 'Name': 'urn:main'}
        assert policy.get_node('wsp:All_0.sp:TransportBinding_0').attr == {}
        assert root.get_node('wsp:PolicyReference_0').attr == {'URI': '#Other'}

    def test_binding_and_operation_policies(self, wsdl, root_of):
        """Binding policies follow documentation; operation policies precede soap:operation."""
        binding = wsdl.binding('B', 'PT')
        binding.policy('BindingPolicy').end()
        binding.operation('Op', 'urn:op').operation_policy_reference('#OpPolicy').end()
        node = root_of(wsdl).get_node('wsdl:binding_0')
        assert node.digest('#t')[:2] == ['wsp:Policy', 'soap:binding']
        assert node.get_node('wsdl:operation_0').digest('#t') == [
            'wsp:PolicyReference',
            'soap:operation',
            'wsdl:input',
            'wsdl:output',
        ]

    def test_service_policy(self, wsdl, root_of):
        """Service policies render before the ports."""
        simple_service(wsdl)
        wsdl.get_services()['UserService'].policy('ServicePolicy')
        assert root_of(wsdl).get_node('wsdl:service_0').digest('#t') == ['wsp:Policy', 'wsdl:port']

    @pytest.mark.parametrize(
        ('assertion', 'expected'),
        [
            (PolicyAssertion(SP_NS, 'sp:UsernameToken'), ('sp:UsernameToken', {})),
            (PolicyAssertion(SP_NS, 'UsernameToken'), ('sp:UsernameToken', {})),
            (PolicyAssertion(WSAT_NS, 'wsat:ATAssertion'), ('wsat:ATAssertion', {'xmlns:wsat': WSAT_NS})),
            (PolicyAssertion(WSAT_NS, 'ATAssertion'), ('wsat:ATAssertion', {'xmlns:wsat': WSAT_NS})),
            (PolicyAssertion('urn:custom', 'Custom'), ('Custom', {'xmlns': 'urn:custom'})),
            (PolicyAssertion('urn:custom', 'c:Custom'), ('c:Custom', {'xmlns:c': 'urn:custom'})),
        ],
    )
    def test_assertion_name(self, wsdl, assertion, expected):
        """Prefixes are reused when declared, otherwise declared locally."""
        wsdl.policy('P').assertion(SP_NS, 'sp:Wss11').end()
        generator = WsdlGenerator(wsdl)
        generator.namespaces = generator.declared_namespaces()
        assert generator.assertion_name(assertion) == expected

    def test_record_assertion_attributes(self, wsdl, root_of):
        """Extension records become assertions with rendered options."""
        record = {'type': 'sp:HttpsToken', 'namespace': SP_NS, 'requireClientCertificate': False, 'skip': None}
        wsdl.policy('P').assertion_from(record).end()
        node = root_of(wsdl).get_node('wsp:Policy_0.sp:HttpsToken_0')
        assert node.attr == {'requireClientCertificate': 'false'}

    def test_prefixed_assertion_attribute_is_declared(self, wsdl, root_of):
        """A well-known attribute prefix missing from the root is declared on the assertion."""
        wsdl.policy('P').assertion('urn:x', 'Foo', {'wsu:Id': 'a1'}).end()
        node = root_of(wsdl).get_node('wsp:Policy_0.Foo_0')
        assert node.attr == {'xmlns': 'urn:x', 'xmlns:wsu': WSU_NS, 'wsu:Id': 'a1'}
        xml = wsdl.build()
        assert f'xmlns:wsu="{WSU_NS}"' in xml
        assert 'wsu:Id="a1"' in xml


class TestBuild:
    """Text output."""

    def test_compact_output(self, wsdl):
        """Compact output starts with the XML declaration."""
        xml = wsdl.build(pretty=False)
        assert xml == (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<wsdl:definitions xmlns:wsdl="{WSDL_NS}" name="TestService" '
            'targetNamespace="http://example.com/test" xmlns:tns="http://example.com/test" '
            f'xmlns:xsd="{XSD_NS}"/>'
        )

    def test_pretty_output(self, wsdl):
        """Pretty output indents children by two spaces."""
        simple_service(wsdl)
        xml = wsdl.build()
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<wsdl:definitions')
        assert '\n  <wsdl:types>' in xml
        assert '\n  <wsdl:service name="UserService">' in xml

    def test_write_to_file(self, wsdl, tmp_path):
        """With filename the document is written and None returned."""
        target = tmp_path / 'service.wsdl'
        assert simple_service(wsdl).build(filename=str(target)) is None
        content = target.read_text(encoding='utf-8')
        assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'name="TestService"' in content

    def test_build_is_repeatable(self, wsdl):
        """Building twice yields the same text."""
        simple_service(wsdl)
        assert wsdl.build(pretty=False) == wsdl.build(pretty=False)

    def test_generator_standalone(self):
        """The generator can be used directly."""
        document = Wsdl.create('Direct', 'urn:direct')
        xml = WsdlGenerator(document).generate(pretty=False)
        assert xml.endswith('xmlns:tns="urn:direct" xmlns:xsd="http://www.w3.org/2001/XMLSchema"/>')
