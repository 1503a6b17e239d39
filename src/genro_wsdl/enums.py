# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Enumerations shared by the WSDL 1.1, WSDL 2.0 and XSD builders."""

from __future__ import annotations

from enum import Enum


class XsdType(str, Enum):
    """XML Schema built-in types."""

    # Primitive types
    STRING = 'string'
    BOOLEAN = 'boolean'
    DECIMAL = 'decimal'
    FLOAT = 'float'
    DOUBLE = 'double'
    DURATION = 'duration'
    DATE_TIME = 'dateTime'
    TIME = 'time'
    DATE = 'date'
    HEX_BINARY = 'hexBinary'
    BASE64_BINARY = 'base64Binary'
    ANY_URI = 'anyURI'
    QNAME = 'QName'

    # Integer family
    INTEGER = 'integer'
    INT = 'int'
    LONG = 'long'
    SHORT = 'short'
    BYTE = 'byte'
    NON_NEGATIVE_INTEGER = 'nonNegativeInteger'
    POSITIVE_INTEGER = 'positiveInteger'
    NON_POSITIVE_INTEGER = 'nonPositiveInteger'
    NEGATIVE_INTEGER = 'negativeInteger'
    UNSIGNED_LONG = 'unsignedLong'
    UNSIGNED_INT = 'unsignedInt'
    UNSIGNED_SHORT = 'unsignedShort'
    UNSIGNED_BYTE = 'unsignedByte'

    # String family
    NORMALIZED_STRING = 'normalizedString'
    TOKEN = 'token'
    LANGUAGE = 'language'
    NAME = 'Name'
    NCNAME = 'NCName'
    ID = 'ID'
    IDREF = 'IDREF'
    IDREFS = 'IDREFS'

    # Special types
    ANY_TYPE = 'anyType'
    ANY_SIMPLE_TYPE = 'anySimpleType'

    # SOAP attachment reference (WS-I Attachments Profile)
    SWA_REF = 'swaRef'

    def local_name(self) -> str:
        return self.value

    def prefixed(self, prefix: str) -> str:
        """Return the type qualified with ``prefix`` (swaRef is never prefixed)."""
        if self is XsdType.SWA_REF:
            return self.value
        return f'{prefix}:{self.value}'

    def for_wsdl1(self) -> str:
        return self.prefixed('xsd')

    def for_wsdl2(self) -> str:
        return self.prefixed('xs')


class BindingStyle(str, Enum):
    DOCUMENT = 'document'
    RPC = 'rpc'


class BindingUse(str, Enum):
    LITERAL = 'literal'
    ENCODED = 'encoded'


class SoapVersion(str, Enum):
    """SOAP protocol version used by WSDL 1.1 bindings."""

    SOAP_11 = '1.1'
    SOAP_12 = '1.2'

    def namespace(self) -> str:
        """WSDL SOAP binding namespace for this version."""
        if self is SoapVersion.SOAP_12:
            return 'http://schemas.xmlsoap.org/wsdl/soap12/'
        return 'http://schemas.xmlsoap.org/wsdl/soap/'

    def envelope_namespace(self) -> str:
        """SOAP envelope namespace for this version."""
        if self is SoapVersion.SOAP_12:
            return 'http://www.w3.org/2003/05/soap-envelope'
        return 'http://schemas.xmlsoap.org/soap/envelope/'


class DerivationControl(str, Enum):
    """Values for the XSD ``block`` and ``final`` attributes."""

    ALL = '#all'
    EXTENSION = 'extension'
    RESTRICTION = 'restriction'
    SUBSTITUTION = 'substitution'
    LIST = 'list'
    UNION = 'union'


class MessageExchangePattern(str, Enum):
    """WSDL 2.0 message exchange patterns."""

    IN_OUT = 'http://www.w3.org/ns/wsdl/in-out'
    IN_ONLY = 'http://www.w3.org/ns/wsdl/in-only'
    ROBUST_IN_ONLY = 'http://www.w3.org/ns/wsdl/robust-in-only'
    OUT_ONLY = 'http://www.w3.org/ns/wsdl/out-only'
    OUT_IN = 'http://www.w3.org/ns/wsdl/out-in'
    OUT_OPTIONAL_IN = 'http://www.w3.org/ns/wsdl/out-opt-in'
    IN_OPTIONAL_OUT = 'http://www.w3.org/ns/wsdl/in-opt-out'
    ROBUST_OUT_ONLY = 'http://www.w3.org/ns/wsdl/robust-out-only'


def enum_text(value: Enum | str | None) -> str | None:
    """Return the string form of an enum member or plain string."""
    if isinstance(value, Enum):
        return value.value
    return value
