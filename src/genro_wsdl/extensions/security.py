# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-SecurityPolicy 1.2 vocabulary.

Assertion records carry ``sp:``-prefixed types and feed
``Policy.assertion_from()``. ``TransportBinding`` is a small builder whose
configuration is read back with ``get_config()``:

    >>> SecurityPolicy.transport_binding() \\
    ...     .transport_token().https_token().end() \\
    ...     .algorithm_suite(AlgorithmSuite.BASIC256) \\
    ...     .include_timestamp() \\
    ...     .end()
    {'includeTimestamp': True, 'transportToken': {...}, 'algorithmSuite': 'Basic256'}
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..namespaces import SP_NS
from ..validations import EnumValue
from .policy import ConfigBuilder, policy_record


class AlgorithmSuite(str, Enum):
    BASIC256 = 'Basic256'
    BASIC192 = 'Basic192'
    BASIC128 = 'Basic128'
    TRIPLE_DES = 'TripleDes'
    BASIC256_SHA256 = 'Basic256Sha256'
    BASIC192_SHA256 = 'Basic192Sha256'
    BASIC128_SHA256 = 'Basic128Sha256'
    TRIPLE_DES_SHA256 = 'TripleDesSha256'
    BASIC256_RSA15 = 'Basic256Rsa15'
    BASIC192_RSA15 = 'Basic192Rsa15'
    BASIC128_RSA15 = 'Basic128Rsa15'
    TRIPLE_DES_RSA15 = 'TripleDesRsa15'
    BASIC256_SHA256_RSA15 = 'Basic256Sha256Rsa15'
    BASIC192_SHA256_RSA15 = 'Basic192Sha256Rsa15'
    BASIC128_SHA256_RSA15 = 'Basic128Sha256Rsa15'
    TRIPLE_DES_SHA256_RSA15 = 'TripleDesSha256Rsa15'


class SecurityTokenInclusion(str, Enum):
    NEVER = f'{SP_NS}/IncludeToken/Never'
    ONCE = f'{SP_NS}/IncludeToken/Once'
    ALWAYS_TO_RECIPIENT = f'{SP_NS}/IncludeToken/AlwaysToRecipient'
    ALWAYS_TO_INITIATOR = f'{SP_NS}/IncludeToken/AlwaysToInitiator'
    ALWAYS = f'{SP_NS}/IncludeToken/Always'


as_algorithm_suite = EnumValue(AlgorithmSuite)
as_token_inclusion = EnumValue(SecurityTokenInclusion)


class TokenAssertion:
    """A token requirement with an optional inclusion mode."""

    def __init__(self, token_type: str) -> None:
        self._token_type = token_type
        self._include_token: SecurityTokenInclusion | None = None

    def include_token(self, inclusion: SecurityTokenInclusion | str) -> TokenAssertion:
        self._include_token = as_token_inclusion(inclusion)
        return self

    def get_token_type(self) -> str:
        return self._token_type

    def get_include_token(self) -> SecurityTokenInclusion | None:
        return self._include_token

    def to_dict(self) -> dict[str, Any]:
        config: dict[str, Any] = {'tokenType': self._token_type}
        if self._include_token is not None:
            config['includeToken'] = self._include_token.value
        return config


class TransportToken:
    def __init__(self, parent: TransportBinding) -> None:
        self._parent = parent
        self._https_token = False
        self._require_client_certificate = False

    def https_token(self) -> TransportToken:
        self._https_token = True
        return self

    def require_client_certificate(self, require: bool = True) -> TransportToken:
        self._require_client_certificate = require
        return self

    def is_https_token(self) -> bool:
        return self._https_token

    def is_client_certificate_required(self) -> bool:
        return self._require_client_certificate

    def end(self) -> TransportBinding:
        return self._parent

    def get_config(self) -> dict[str, bool]:
        return {
            'httpsToken': self._https_token,
            'requireClientCertificate': self._require_client_certificate,
        }


class TransportBinding(ConfigBuilder):
    """``sp:TransportBinding`` configuration builder.

    ``end()`` returns the parent given at construction, or the
    configuration dict when there is none.
    """

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._transport_token: TransportToken | None = None
        self._algorithm_suite: AlgorithmSuite | None = None
        self._include_timestamp = False
        self._layout: str | None = None

    def transport_token(self) -> TransportToken:
        self._transport_token = TransportToken(self)
        return self._transport_token

    def algorithm_suite(self, suite: AlgorithmSuite | str) -> TransportBinding:
        self._algorithm_suite = as_algorithm_suite(suite)
        return self

    def include_timestamp(self, include: bool = True) -> TransportBinding:
        self._include_timestamp = include
        return self

    def layout(self, layout: str) -> TransportBinding:
        self._layout = layout
        return self

    def get_transport_token(self) -> TransportToken | None:
        return self._transport_token

    def get_algorithm_suite(self) -> AlgorithmSuite | None:
        return self._algorithm_suite

    def is_timestamp_included(self) -> bool:
        return self._include_timestamp

    def get_layout(self) -> str | None:
        return self._layout

    def get_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {'includeTimestamp': self._include_timestamp}
        if self._transport_token is not None:
            config['transportToken'] = self._transport_token.get_config()
        if self._algorithm_suite is not None:
            config['algorithmSuite'] = self._algorithm_suite.value
        if self._layout is not None:
            config['layout'] = self._layout
        return config


class SecurityPolicy:
    """Factories for WS-SecurityPolicy assertion records."""

    NAMESPACE_URI = SP_NS

    @staticmethod
    def transport_binding(parent: Any = None) -> TransportBinding:
        return TransportBinding(parent)

    @staticmethod
    def symmetric_binding() -> dict[str, Any]:
        return policy_record('sp:SymmetricBinding', SP_NS)

    @staticmethod
    def asymmetric_binding() -> dict[str, Any]:
        return policy_record('sp:AsymmetricBinding', SP_NS)

    @staticmethod
    def username_token(password_type: str | None = None) -> dict[str, Any]:
        return policy_record('sp:UsernameToken', SP_NS, passwordType=password_type)

    @staticmethod
    def x509_token(token_type: str | None = None) -> dict[str, Any]:
        return policy_record('sp:X509Token', SP_NS, tokenType=token_type)

    @staticmethod
    def saml_token(token_type: str | None = None) -> dict[str, Any]:
        return policy_record('sp:SamlToken', SP_NS, tokenType=token_type)

    @staticmethod
    def signed_parts(parts: list[str] | None = None) -> dict[str, Any]:
        return policy_record('sp:SignedParts', SP_NS, parts=parts)

    @staticmethod
    def encrypted_parts(parts: list[str] | None = None) -> dict[str, Any]:
        return policy_record('sp:EncryptedParts', SP_NS, parts=parts)

    @staticmethod
    def signed_elements(xpaths: list[str] | None = None) -> dict[str, Any]:
        return policy_record('sp:SignedElements', SP_NS, xpaths=xpaths)

    @staticmethod
    def encrypted_elements(xpaths: list[str] | None = None) -> dict[str, Any]:
        return policy_record('sp:EncryptedElements', SP_NS, xpaths=xpaths)

    @staticmethod
    def issued_token() -> dict[str, Any]:
        return policy_record('sp:IssuedToken', SP_NS)

    @staticmethod
    def secure_conversation_token() -> dict[str, Any]:
        return policy_record('sp:SecureConversationToken', SP_NS)

    @staticmethod
    def kerberos_token() -> dict[str, Any]:
        return policy_record('sp:KerberosToken', SP_NS)

    @staticmethod
    def spnego_context_token() -> dict[str, Any]:
        return policy_record('sp:SpnegoContextToken', SP_NS)

    @staticmethod
    def wss10() -> dict[str, Any]:
        return policy_record('sp:Wss10', SP_NS)

    @staticmethod
    def wss11() -> dict[str, Any]:
        return policy_record('sp:Wss11', SP_NS)

    @staticmethod
    def trust10() -> dict[str, Any]:
        return policy_record('sp:Trust10', SP_NS)

    @staticmethod
    def trust13() -> dict[str, Any]:
        return policy_record('sp:Trust13', SP_NS)
