# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for WS-Policy, WS-Addressing, MIME and HTTP extension models."""

import pytest

from genro_wsdl.extensions import (
    Action,
    EndpointReference,
    HttpBinding,
    HttpOperation,
    MimeContent,
    MimeMultipartRelated,
    MimePart,
    MimeXml,
    Policy,
    PolicyAssertion,
    policy_record,
)
from genro_wsdl.namespaces import SP_NS, WSAT_NS


class TestPolicyRecords:
    """Extension records and their conversion to assertions."""

    def test_policy_record_drops_none(self):
        """Options set to None are left out."""
        assert policy_record('sp:Wss11', SP_NS, mustSupportRefThumbprint=True, other=None) == {
            'type': 'sp:Wss11',
            'namespace': SP_NS,
            'mustSupportRefThumbprint': True,
        }

    def test_assertion_from_record(self):
        """Scalars render, booleans become true/false, lists are space-joined."""
        record = {
            'type': 'sp:SignedParts',
            'namespace': SP_NS,
            'body': True,
            'parts': ['Body', 'Header'],
            'size': 256,
            'nested': {'ignored': 1},
            'items': [{'ignored': 1}],
        }
        assertion = Policy().assertion_from(record).get_assertions()[0]
        assert assertion == PolicyAssertion(
            SP_NS, 'sp:SignedParts', {'body': 'true', 'parts': 'Body Header', 'size': '256'}
        )

    def test_record_without_options(self):
        """A record with no options has no attributes."""
        assertion = Policy().assertion_from(policy_record('sp:Wss10', SP_NS)).get_assertions()[0]
        assert assertion.attributes is None
        assert assertion.prefix == 'sp'


class TestPolicyTree:
    """Operators, nesting and traversal."""

    def test_nesting_and_end(self):
        """end() walks back up the operator chain."""
        policy = Policy('P')
        operator = policy.exactly_one()
        inner = operator.all()
        assert inner.end() is operator
        assert operator.end() is policy
        assert operator.get_type() == 'exactlyOne'
        assert inner.get_type() == 'all'

    def test_has_assertion_in(self):
        """Assertions are found at any depth, including nested policies."""
        policy = Policy('P')
        policy.all().policy('Inner').assertion(SP_NS, 'sp:Wss11')
        assert policy.has_assertion_in(SP_NS)
        assert not policy.has_assertion_in(WSAT_NS)

    def test_iter_assertions(self):
        """Assertions are yielded in document order."""
        policy = Policy('P').assertion(WSAT_NS, 'wsat:ATAssertion')
        policy.all().assertion(SP_NS, 'sp:A').assertion(SP_NS, 'sp:B')
        assert [a.local_name for a in policy.iter_assertions()] == ['sp:A', 'sp:B', 'wsat:ATAssertion']

    def test_references(self):
        """Policy references keep their URI."""
        policy = Policy().reference('#Common').reference('#Other')
        assert [r.uri for r in policy.get_references()] == ['#Common', '#Other']

    def test_assertion_attributes_are_copied(self):
        """Later changes to the caller's dict do not leak into the assertion."""
        attributes = {'a': '1'}
        policy = Policy().assertion(SP_NS, 'sp:X', attributes)
        attributes['b'] = '2'
        assert policy.get_assertions()[0].attributes == {'a': '1'}


class TestAddressing:
    """Actions and endpoint references."""

    def test_action_with_fault(self):
        """with_fault returns a new action and leaves the original unchanged."""
        action = Action('urn:in', 'urn:out')
        updated = action.with_fault('F', 'urn:f')
        assert dict(updated.fault_actions) == {'F': 'urn:f'}
        assert dict(action.fault_actions) == {}
        with pytest.raises(TypeError):
            updated.fault_actions['G'] = 'urn:g'

    def test_endpoint_reference(self):
        """Parameters and metadata are created lazily and end back on the reference."""
        epr = EndpointReference('http://example.com/ep')
        assert epr.to_dict() == {'address': 'http://example.com/ep'}
        assert epr.reference_parameters().parameter('urn:ns', 'Id', '42').end() is epr
        assert epr.reference_parameters() is epr.get_reference_parameters()
        epr.metadata().add('urn:meta', 'Info', 'text')
        assert epr.to_dict() == {
            'address': 'http://example.com/ep',
            'referenceParameters': [{'namespace': 'urn:ns', 'localName': 'Id', 'value': '42'}],
            'metadata': [{'namespace': 'urn:meta', 'localName': 'Info', 'content': 'text'}],
        }


class TestMimeAndHttp:
    """MIME multipart and HTTP binding models."""

    def test_multipart(self):
        """Parts are appended in order; named parts keep their name."""
        multipart = MimeMultipartRelated.create() \
            .soap_body_part() \
            .mime_part('image', 'image/jpeg') \
            .mime_part_named('doc', 'document', 'application/pdf')
        parts = multipart.get_parts()
        assert [p.has_soap_body() for p in parts] == [True, False, False]
        assert parts[1].get_mime_content() == MimeContent('image', 'image/jpeg')
        assert parts[2].get_name() == 'doc'

    def test_part_builder(self):
        """part() returns the new part, whose end() returns the multipart."""
        multipart = MimeMultipartRelated()
        part = multipart.part('attachment')
        assert part.content('file', 'text/plain').end() is multipart
        assert MimePart.create('x').soap_body().has_soap_body()

    def test_mime_xml(self):
        """mimeXml carries an optional part."""
        assert MimeXml.create('body').get_part() == 'body'
        assert MimeXml.create().get_part() is None

    def test_http_factories(self):
        """Verb shortcuts build the matching binding."""
        assert [HttpBinding.get().verb, HttpBinding.post().verb] == ['GET', 'POST']
        assert HttpBinding.put() == HttpBinding.create('PUT')
        assert HttpBinding.delete().verb == 'DELETE'
        assert HttpOperation.create('/items').location == '/items'
