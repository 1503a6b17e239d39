# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Namespace URIs emitted by the generators and the WS-* extensions."""

from __future__ import annotations

# =============================================================================
# Core vocabularies
# =============================================================================

XML_NS = 'http://www.w3.org/XML/1998/namespace'
XSD_NS = 'http://www.w3.org/2001/XMLSchema'

WSDL_NS = 'http://schemas.xmlsoap.org/wsdl/'
SOAP11_NS = 'http://schemas.xmlsoap.org/wsdl/soap/'
SOAP12_NS = 'http://schemas.xmlsoap.org/wsdl/soap12/'
SOAP_HTTP_TRANSPORT = 'http://schemas.xmlsoap.org/soap/http'
HTTP_BINDING_NS = 'http://schemas.xmlsoap.org/wsdl/http/'
MIME_NS = 'http://schemas.xmlsoap.org/wsdl/mime/'

WSDL2_NS = 'http://www.w3.org/ns/wsdl'
WSDL2_SOAP_NS = 'http://www.w3.org/ns/wsdl/soap'
WSDL2_HTTP_NS = 'http://www.w3.org/ns/wsdl/http'
SOAP12_HTTP_BINDING = 'http://www.w3.org/2003/05/soap/bindings/HTTP/'

# =============================================================================
# WS-* vocabularies
# =============================================================================

WSP_NS = 'http://www.w3.org/ns/ws-policy'
WSAW_NS = 'http://www.w3.org/2006/05/addressing/wsdl'
WSAM_NS = 'http://www.w3.org/2007/05/addressing/metadata'
SP_NS = 'http://docs.oasis-open.org/ws-sx/ws-securitypolicy/200702'
XOP_NS = 'http://www.w3.org/2004/08/xop/include'
WSOMA_NS = 'http://schemas.xmlsoap.org/ws/2004/09/policy/optimizedmimeserialization'
WSTRUST_NS = 'http://docs.oasis-open.org/ws-sx/ws-trust/200512'
FED_NS = 'http://docs.oasis-open.org/wsfed/federation/200706'
WSAT_NS = 'http://docs.oasis-open.org/ws-tx/wsat/2006/06'
WSBA_NS = 'http://docs.oasis-open.org/ws-tx/wsba/2006/06'
WSCOOR_NS = 'http://docs.oasis-open.org/ws-tx/wscoor/2006/06'
WSE_NS = 'http://schemas.xmlsoap.org/ws/2004/08/eventing'
WSN_NS = 'http://docs.oasis-open.org/wsn/b-2'
WST_NS = 'http://docs.oasis-open.org/wsn/t-1'
WSD_NS = 'http://docs.oasis-open.org/ws-dd/ns/discovery/2009/01'
MEX_NS = 'http://schemas.xmlsoap.org/ws/2004/09/mex'
WSRF_R_NS = 'http://docs.oasis-open.org/wsrf/r-2'
WSRF_RP_NS = 'http://docs.oasis-open.org/wsrf/rp-2'
WSRF_RL_NS = 'http://docs.oasis-open.org/wsrf/rl-2'
WSU_NS = 'http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-wssecurity-utility-1.0.xsd'

# Conventional prefix for each WS-* namespace, used when an assertion
# needs a local declaration.
WELL_KNOWN_PREFIXES: dict[str, str] = {
    WSP_NS: 'wsp',
    WSAW_NS: 'wsaw',
    WSAM_NS: 'wsam',
    SP_NS: 'sp',
    WSOMA_NS: 'wsoma',
    WSTRUST_NS: 'wstrust',
    FED_NS: 'fed',
    WSAT_NS: 'wsat',
    WSBA_NS: 'wsba',
    WSCOOR_NS: 'wscoor',
    WSE_NS: 'wse',
    WSN_NS: 'wsn',
    WST_NS: 'wst',
    WSD_NS: 'wsd',
    MEX_NS: 'mex',
    WSRF_R_NS: 'wsrf-r',
    WSRF_RP_NS: 'wsrf-rp',
    WSRF_RL_NS: 'wsrf-rl',
    WSU_NS: 'wsu',
    HTTP_BINDING_NS: 'http',
    MIME_NS: 'mime',
}
