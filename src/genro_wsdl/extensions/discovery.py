# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-Discovery: announcements, probes and scopes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..namespaces import WSD_NS
from .addressing import EndpointReference
from .policy import policy_record


class ScopeMatchType(str, Enum):
    RFC3986 = f'{WSD_NS}/rfc3986'
    UUID = f'{WSD_NS}/uuid'
    LDAP = f'{WSD_NS}/ldap'
    STRCMP0 = f'{WSD_NS}/strcmp0'
    NONE = f'{WSD_NS}/none'


@dataclass(frozen=True)
class Scopes:
    match_by: ScopeMatchType = ScopeMatchType.RFC3986
    values: tuple[str, ...] = ()

    @classmethod
    def rfc3986(cls, values: list[str]) -> Scopes:
        return cls(ScopeMatchType.RFC3986, tuple(values))

    @classmethod
    def uuid(cls, values: list[str]) -> Scopes:
        return cls(ScopeMatchType.UUID, tuple(values))

    @classmethod
    def ldap(cls, values: list[str]) -> Scopes:
        return cls(ScopeMatchType.LDAP, tuple(values))

    @classmethod
    def strcmp0(cls, values: list[str]) -> Scopes:
        return cls(ScopeMatchType.STRCMP0, tuple(values))

    @classmethod
    def none(cls, values: list[str]) -> Scopes:
        return cls(ScopeMatchType.NONE, tuple(values))


@dataclass(frozen=True)
class _Announcement:
    endpoint_reference: EndpointReference
    types: tuple[str, ...] = ()
    scopes: Scopes | None = None
    x_addrs: tuple[str, ...] = ()
    metadata_version: int = 1

    @classmethod
    def create(cls, address: str, types: list[str] | None = None, scopes: Scopes | None = None,
               x_addrs: list[str] | None = None, metadata_version: int = 1):
        return cls(EndpointReference(address), tuple(types or ()), scopes, tuple(x_addrs or ()),
                   metadata_version)


class Hello(_Announcement):
    """``wsd:Hello`` sent when a target service joins the network."""


class ProbeMatch(_Announcement):
    """A target service matching a probe."""


@dataclass(frozen=True)
class Bye:
    endpoint_reference: EndpointReference

    @classmethod
    def create(cls, address: str) -> Bye:
        return cls(EndpointReference(address))


@dataclass(frozen=True)
class Probe:
    types: tuple[str, ...] = ()
    scopes: Scopes | None = None

    @classmethod
    def create(cls, types: list[str] | None = None, scopes: Scopes | None = None) -> Probe:
        return cls(tuple(types or ()), scopes)

    @classmethod
    def for_types(cls, types: list[str]) -> Probe:
        return cls(tuple(types))

    @classmethod
    def in_scopes(cls, scopes: Scopes) -> Probe:
        return cls((), scopes)


class DiscoveryPolicy:
    NAMESPACE_URI = WSD_NS

    @staticmethod
    def discoverable() -> dict[str, Any]:
        return policy_record('wsd:Discoverable', WSD_NS, enabled=True)

    @staticmethod
    def adhoc() -> dict[str, Any]:
        return policy_record('wsd:DiscoveryMode', WSD_NS, mode='adhoc')

    @staticmethod
    def managed(proxy_address: str | None = None) -> dict[str, Any]:
        return policy_record('wsd:DiscoveryMode', WSD_NS, mode='managed', proxyAddress=proxy_address)

    @staticmethod
    def discovery_endpoint(address: str) -> dict[str, Any]:
        return policy_record('wsd:DiscoveryEndpoint', WSD_NS, address=address)

    @staticmethod
    def suppression(suppress_hello: bool = False, suppress_bye: bool = False) -> dict[str, Any]:
        return policy_record(
            'wsd:Suppression', WSD_NS, suppressHello=suppress_hello, suppressBye=suppress_bye
        )
