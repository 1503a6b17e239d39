# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-Trust: issued tokens, secure conversation and token requests."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from ..namespaces import FED_NS, WSTRUST_NS
from ..validations import EnumValue
from .security import TokenAssertion

if TYPE_CHECKING:
    from .addressing import EndpointReference
    from .policy import Policy

DEFAULT_CLAIMS_DIALECT = 'http://docs.oasis-open.org/wsfed/authorization/200706/authclaims'


class KeyType(str, Enum):
    PUBLIC_KEY = f'{WSTRUST_NS}/PublicKey'
    SYMMETRIC_KEY = f'{WSTRUST_NS}/SymmetricKey'
    BEARER = f'{WSTRUST_NS}/Bearer'


class TokenType(str, Enum):
    SAML11 = 'http://docs.oasis-open.org/wss/oasis-wss-saml-token-profile-1.1#SAMLV1.1'
    SAML20 = 'http://docs.oasis-open.org/wss/oasis-wss-saml-token-profile-1.1#SAMLV2.0'
    JWT = 'urn:ietf:params:oauth:token-type:jwt'
    KERBEROS = 'http://docs.oasis-open.org/wss/oasis-wss-kerberos-token-profile-1.1#GSS_Kerberosv5_AP_REQ'
    X509 = 'http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-x509-token-profile-1.0#X509v3'
    USERNAME = 'http://docs.oasis-open.org/wss/2004/01/oasis-200401-wss-username-token-profile-1.0#UsernameToken'
    OPAQUE = 'http://docs.oasis-open.org/wss/oasis-wss-saml-token-profile-1.1#Opaque'


as_key_type = EnumValue(KeyType)
as_token_type = EnumValue(TokenType)


class Claims:
    """Requested claim types under a claims dialect."""

    def __init__(self, dialect_uri: str = DEFAULT_CLAIMS_DIALECT) -> None:
        self._dialect_uri = dialect_uri
        self._claim_types: list[str] = []

    def add_claim_type(self, claim_type: str) -> Claims:
        self._claim_types.append(claim_type)
        return self

    def add_claim_types(self, claim_types: list[str]) -> Claims:
        for claim_type in claim_types:
            self.add_claim_type(claim_type)
        return self

    def get_dialect_uri(self) -> str:
        return self._dialect_uri

    def get_claim_types(self) -> tuple[str, ...]:
        return tuple(self._claim_types)

    def to_dict(self) -> dict[str, Any]:
        return {'dialectUri': self._dialect_uri, 'claimTypes': list(self._claim_types)}


class RequestSecurityToken:
    """Template of a ``wst:RequestSecurityToken``."""

    def __init__(self) -> None:
        self._token_type: TokenType | None = None
        self._key_type: KeyType | None = None
        self._key_size: int | None = None
        self._claims: Claims | None = None

    def token_type(self, token_type: TokenType | str) -> RequestSecurityToken:
        self._token_type = as_token_type(token_type)
        return self

    def key_type(self, key_type: KeyType | str) -> RequestSecurityToken:
        self._key_type = as_key_type(key_type)
        return self

    def key_size(self, key_size: int) -> RequestSecurityToken:
        self._key_size = key_size
        return self

    def claims(self, claims: Claims) -> RequestSecurityToken:
        self._claims = claims
        return self

    def get_token_type(self) -> TokenType | None:
        return self._token_type

    def get_key_type(self) -> KeyType | None:
        return self._key_type

    def get_key_size(self) -> int | None:
        return self._key_size

    def get_claims(self) -> Claims | None:
        return self._claims

    def to_dict(self) -> dict[str, Any]:
        config: dict[str, Any] = {}
        if self._token_type is not None:
            config['tokenType'] = self._token_type.value
        if self._key_type is not None:
            config['keyType'] = self._key_type.value
        if self._key_size is not None:
            config['keySize'] = self._key_size
        if self._claims is not None:
            config['claims'] = self._claims.to_dict()
        return config


class IssuedToken(TokenAssertion):
    """``sp:IssuedToken`` with an optional issuer and token request template."""

    def __init__(self) -> None:
        super().__init__('sp:IssuedToken')
        self._issuer: EndpointReference | None = None
        self._template: RequestSecurityToken | None = None

    def issuer(self, issuer: EndpointReference) -> IssuedToken:
        self._issuer = issuer
        return self

    def request_security_token_template(self, template: RequestSecurityToken) -> IssuedToken:
        self._template = template
        return self

    def get_issuer(self) -> EndpointReference | None:
        return self._issuer

    def get_request_security_token_template(self) -> RequestSecurityToken | None:
        return self._template

    def to_dict(self) -> dict[str, Any]:
        config = super().to_dict()
        if self._issuer is not None:
            config['issuer'] = self._issuer.to_dict()
        if self._template is not None:
            config['requestSecurityTokenTemplate'] = self._template.to_dict()
        return config


class SecureConversation(TokenAssertion):
    """``sp:SecureConversationToken`` with an optional bootstrap policy."""

    def __init__(self) -> None:
        super().__init__('sp:SecureConversationToken')
        self._bootstrap_policy: Policy | None = None
        self._issuer: EndpointReference | None = None

    def bootstrap_policy(self, policy: Policy) -> SecureConversation:
        self._bootstrap_policy = policy
        return self

    def issuer(self, issuer: EndpointReference) -> SecureConversation:
        self._issuer = issuer
        return self

    def get_bootstrap_policy(self) -> Policy | None:
        return self._bootstrap_policy

    def get_issuer(self) -> EndpointReference | None:
        return self._issuer

    def to_dict(self) -> dict[str, Any]:
        config = super().to_dict()
        if self._bootstrap_policy is not None:
            config['bootstrapPolicy'] = {'id': self._bootstrap_policy.get_id()}
        if self._issuer is not None:
            config['issuer'] = self._issuer.to_dict()
        return config


class TrustPolicy:
    NAMESPACE_URI = WSTRUST_NS
    FEDERATION_NAMESPACE_URI = FED_NS

    @staticmethod
    def issued_token() -> IssuedToken:
        return IssuedToken()

    @staticmethod
    def secure_conversation_token() -> SecureConversation:
        return SecureConversation()

    @staticmethod
    def request_security_token() -> RequestSecurityToken:
        return RequestSecurityToken()

    @staticmethod
    def claims(dialect_uri: str | None = None) -> Claims:
        return Claims(dialect_uri or DEFAULT_CLAIMS_DIALECT)
