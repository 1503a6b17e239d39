# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for the WSDL 1.1 document builders: messages, portTypes, bindings, services and operations."""

import pytest

from genro_wsdl import (
    BindingStyle,
    BindingUse,
    InvalidArgumentException,
    InvalidOperationException,
    SoapVersion,
    Wsdl,
    XsdType,
)
from genro_wsdl.namespaces import SOAP_HTTP_TRANSPORT


class TestDocument:
    """Document creation and defaults."""

    def test_create(self, wsdl):
        """create() stores name and target namespace."""
        assert wsdl.get_name() == 'TestService'
        assert wsdl.get_target_namespace() == 'http://example.com/test'

    def test_defaults(self, wsdl):
        """SOAP 1.1, document style and literal use by default."""
        assert wsdl.get_soap_version() is SoapVersion.SOAP_11
        assert wsdl.get_default_style() is BindingStyle.DOCUMENT
        assert wsdl.get_default_use() is BindingUse.LITERAL
        assert wsdl.get_soap_namespace() == 'http://schemas.xmlsoap.org/wsdl/soap/'

    def test_soap_12(self, wsdl):
        """Switching to SOAP 1.2 changes the binding namespace."""
        wsdl.soap_version('1.2')
        assert wsdl.get_soap_namespace() == 'http://schemas.xmlsoap.org/wsdl/soap12/'
        assert SoapVersion.SOAP_12.envelope_namespace() == 'http://www.w3.org/2003/05/soap-envelope'

    def test_unknown_enum_value_rejected(self, wsdl):
        """String values outside an enum raise InvalidArgumentException."""
        with pytest.raises(InvalidArgumentException, match='not a valid BindingStyle'):
            wsdl.default_style('fancy')

    def test_binding_takes_document_defaults(self, wsdl):
        """Bindings copy the defaults current at their creation."""
        wsdl.default_style('rpc').default_use(BindingUse.ENCODED)
        binding = wsdl.binding('B', 'PT')
        assert binding.get_style() is BindingStyle.RPC
        assert binding.get_use() is BindingUse.ENCODED
        assert binding.get_transport() == SOAP_HTTP_TRANSPORT

    def test_collections_are_read_only(self, wsdl):
        """Getters expose read-only views."""
        wsdl.message('M').end()
        with pytest.raises(TypeError):
            wsdl.get_messages()['X'] = None

    def test_last_write_wins(self, wsdl):
        """A repeated name replaces the earlier component and keeps its slot."""
        wsdl.message('A').part('x', XsdType.INT).end()
        wsdl.message('B').end()
        wsdl.message('A').part('y', XsdType.STRING).end()
        messages = wsdl.get_messages()
        assert list(messages) == ['A', 'B']
        assert [p.name for p in messages['A'].get_parts()] == ['y']

    def test_end_returns_document(self, wsdl):
        """Every top-level builder's end() returns the document."""
        assert wsdl.message('M').end() is wsdl
        assert wsdl.port_type('PT').end() is wsdl
        assert wsdl.binding('B', 'PT').end() is wsdl
        assert wsdl.service('S').end() is wsdl
        assert wsdl.complex_type('C').end() is wsdl
        assert wsdl.simple_type('S').end() is wsdl


class TestMessagesAndPortTypes:
    """Abstract definitions."""

    def test_message_parts(self, wsdl):
        """Parts keep their order; tns-prefixed names are element parts."""
        message = wsdl.message('GetUserInput').part('parameters', 'tns:GetUserRequest').part('id', XsdType.INT)
        parts = message.get_parts()
        assert [p.name for p in parts] == ['parameters', 'id']
        assert parts[0].is_element
        assert not parts[1].is_element

    def test_port_type_operation(self, wsdl):
        """Empty message names are treated as absent."""
        port_type = wsdl.port_type('PT').operation('Notify', '', 'NotifyOutput')
        operation = port_type.get_operations()['Notify']
        assert operation.input is None
        assert operation.output == 'NotifyOutput'
        assert operation.fault is None

    def test_fault_action_needs_action(self, wsdl):
        """A fault action on an operation without actions is rejected."""
        with pytest.raises(InvalidOperationException) as exc:
            wsdl.port_type('PT').fault_action('Op', 'Err', 'urn:err')
        assert str(exc.value) == "No action defined for operation 'Op'. Call action() first."

    def test_actions(self, wsdl):
        """Fault actions accumulate on the operation's action."""
        port_type = wsdl.port_type('PT').action('Op', 'urn:in', 'urn:out').fault_action('Op', 'Err', 'urn:err')
        action = port_type.get_actions()['Op']
        assert action.input_action == 'urn:in'
        assert action.output_action == 'urn:out'
        assert dict(action.fault_actions) == {'Err': 'urn:err'}
        assert port_type.uses_addressing()


class TestBinding:
    """Binding operations and per-operation helpers."""

    def test_operation_overrides(self, wsdl):
        """Per-operation style and use override the binding's."""
        binding = wsdl.binding('B', 'PT').operation('A', 'urn:A').operation('R', 'urn:R', 'rpc', 'encoded')
        operations = binding.get_operations()
        assert operations['A'].style is BindingStyle.DOCUMENT
        assert operations['R'].style is BindingStyle.RPC
        assert operations['R'].use is BindingUse.ENCODED

    def test_headers_attach_to_last_operation(self, wsdl):
        """Headers and header faults go to the most recent operation."""
        binding = wsdl.binding('B', 'PT') \
            .operation('First', 'urn:1') \
            .operation('Second', 'urn:2') \
            .header('Auth', 'token', namespace='urn:auth') \
            .header_fault('AuthFault', 'detail', 'literal')
        ops = binding.get_operations()
        assert ops['First'].get_headers() == ()
        header = ops['Second'].get_headers()[0]
        assert header.get_message() == 'Auth'
        assert header.get_use() is BindingUse.LITERAL
        assert header.get_namespace() == 'urn:auth'
        assert header.get_header_faults()[0].get_message() == 'AuthFault'

    @pytest.mark.parametrize(
        ('call', 'target'),
        [
            (lambda b: b.header('H', 'p'), 'add header to'),
            (lambda b: b.header_fault('F', 'p', 'literal'), 'add header fault to'),
            (lambda b: b.input_mime(), 'add MIME to'),
            (lambda b: b.output_mime(), 'add MIME to'),
            (lambda b: b.http_operation('/x'), 'add HTTP operation to'),
            (lambda b: b.http_url_encoded(), 'add HTTP URL-encoded to'),
            (lambda b: b.http_url_replacement(), 'add HTTP URL-replacement to'),
            (lambda b: b.operation_policy('P'), 'attach a policy to'),
            (lambda b: b.operation_policy_reference('#P'), 'attach a policy to'),
        ],
    )
    def test_helpers_need_an_operation(self, wsdl, call, target):
        """Operation helpers fail on a binding without operations."""
        with pytest.raises(InvalidOperationException) as exc:
            call(wsdl.binding('B', 'PT'))
        assert str(exc.value) == f'No operation exists to {target}'

    def test_header_fault_needs_header(self, wsdl):
        """A header fault needs a header on the last operation."""
        binding = wsdl.binding('B', 'PT').operation('Op', 'urn:op')
        with pytest.raises(InvalidOperationException, match='No header exists to add fault to'):
            binding.header_fault('F', 'p', 'literal')

    def test_mime_direction(self, wsdl):
        """mime_multipart dispatches on direction."""
        binding = wsdl.binding('B', 'PT').operation('Op', 'urn:op')
        assert binding.mime_multipart('input').end() is binding
        binding.mime_multipart('output')
        operation = binding.get_operations()['Op']
        assert operation.get_input_mime() is not None
        assert operation.get_output_mime() is not None
        assert operation.has_mime()

    def test_mime_invalid_direction(self, wsdl):
        """Directions other than input/output are rejected."""
        binding = wsdl.binding('B', 'PT').operation('Op', 'urn:op')
        with pytest.raises(InvalidArgumentException) as exc:
            binding.mime_multipart('sideways')
        assert str(exc.value) == "Invalid direction 'sideways', expected 'input' or 'output'"

    def test_operation_policy_end_returns_binding(self, wsdl):
        """An operation policy closes back onto its binding."""
        binding = wsdl.binding('B', 'PT').operation('Op', 'urn:op')
        assert binding.operation_policy('OpPolicy').end() is binding
        assert binding.get_operations()['Op'].get_policies()[0].get_id() == 'OpPolicy'

    def test_http_binding(self, wsdl):
        """http_binding switches the binding to HTTP."""
        binding = wsdl.binding('B', 'PT').http_binding('GET')
        assert binding.is_http()
        assert binding.get_http_binding().verb == 'GET'


class TestService:
    """Services and ports."""

    def test_ports(self, wsdl):
        """Ports are keyed by name."""
        service = wsdl.service('S').port('P1', 'B', 'http://a').port('P2', 'B', 'http://b')
        ports = service.get_ports()
        assert list(ports) == ['P1', 'P2']
        assert ports['P2'].address == 'http://b'


class TestOperationShorthand:
    """Wsdl.operation / one_way / notification materialization."""

    def test_request_response(self, wsdl):
        """end() creates types, messages, portType and binding operations."""
        result = wsdl.operation('GetUser') \
            .input('userId', XsdType.INT) \
            .output('name', XsdType.STRING) \
            .output('email', XsdType.STRING) \
            .end()
        assert result is wsdl
        types = wsdl.get_complex_types()
        assert list(types) == ['GetUserRequest', 'GetUserResponse']
        assert [e.name for e in types['GetUserResponse'].get_elements()] == ['name', 'email']
        messages = wsdl.get_messages()
        assert list(messages) == ['GetUserInput', 'GetUserOutput']
        assert messages['GetUserInput'].get_parts()[0].type == 'tns:GetUserRequest'
        operation = wsdl.get_port_types()['TestServicePortType'].get_operations()['GetUser']
        assert (operation.input, operation.output, operation.fault) == ('GetUserInput', 'GetUserOutput', None)
        binding_op = wsdl.get_bindings()['TestServiceBinding'].get_operations()['GetUser']
        assert binding_op.soap_action == 'http://example.com/test/GetUser'

    def test_faults(self, wsdl):
        """Fault elements produce a fault type and a fault message."""
        wsdl.operation('Pay').input('amount', XsdType.DECIMAL).fault('reason', XsdType.STRING).end()
        assert 'PayFault' in wsdl.get_complex_types()
        assert wsdl.get_messages()['PayFault'].get_parts()[0].name == 'fault'
        operation = wsdl.get_port_types()['TestServicePortType'].get_operations()['Pay']
        assert operation.fault == 'PayFault'

    def test_shared_port_type_and_binding(self, wsdl):
        """Successive shorthands reuse the same portType and binding."""
        wsdl.operation('A').soap_action('urn:custom').end()
        wsdl.operation('B').end()
        port_types = wsdl.get_port_types()
        assert list(port_types) == ['TestServicePortType']
        assert list(port_types['TestServicePortType'].get_operations()) == ['A', 'B']
        assert wsdl.get_bindings()['TestServiceBinding'].get_operations()['A'].soap_action == 'urn:custom'

    def test_one_way(self, wsdl):
        """A one-way operation has no response."""
        wsdl.one_way('Log').input('line', XsdType.STRING).end()
        assert 'LogResponse' not in wsdl.get_complex_types()
        operation = wsdl.get_port_types()['TestServicePortType'].get_operations()['Log']
        assert operation.output is None

    def test_notification(self, wsdl):
        """A notification has no request."""
        wsdl.notification('Alert').output('message', XsdType.STRING).end()
        assert 'AlertRequest' not in wsdl.get_complex_types()
        operation = wsdl.get_port_types()['TestServicePortType'].get_operations()['Alert']
        assert operation.input is None
        assert operation.output == 'AlertOutput'

    def test_actions_copied_to_port_type_and_binding(self, wsdl):
        """Addressing actions reach both portType and binding."""
        wsdl.operation('Op').action('urn:in', 'urn:out').fault_action('OpFault', 'urn:fault').end()
        for target in (wsdl.get_port_types()['TestServicePortType'], wsdl.get_bindings()['TestServiceBinding']):
            action = target.get_actions()['Op']
            assert action.output_action == 'urn:out'
            assert action.fault_actions['OpFault'] == 'urn:fault'

    def test_fault_action_before_action(self, wsdl):
        """fault_action without action raises."""
        with pytest.raises(InvalidOperationException) as exc:
            wsdl.operation('Op').fault_action('F', 'urn:f')
        assert str(exc.value) == "No action defined for operation 'Op'. Call action() first."


class TestImports:
    """WSDL imports."""

    def test_wsdl_import(self):
        """Imports keep their order."""
        wsdl = Wsdl.create('S', 'urn:s').wsdl_import('urn:a', 'a.wsdl').wsdl_import('urn:b', 'b.wsdl')
        assert [i.namespace for i in wsdl.get_imports()] == ['urn:a', 'urn:b']
