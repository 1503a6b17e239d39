# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WSDL 2.0 ``<service>`` and its endpoints."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from ..documentation import Documented

if TYPE_CHECKING:
    from .document import Wsdl2


class Endpoint(Documented):
    def __init__(self, service: Service2, name: str, binding: str, address: str) -> None:
        self._service = service
        self._name = name
        self._binding = binding
        self._address = address

    def end(self) -> Service2:
        return self._service

    def get_name(self) -> str:
        return self._name

    def get_binding(self) -> str:
        return self._binding

    def get_address(self) -> str:
        return self._address


class Service2(Documented):
    def __init__(self, wsdl: Wsdl2, name: str) -> None:
        self._wsdl = wsdl
        self._name = name
        self._interface_ref: str | None = None
        self._endpoints: dict[str, Endpoint] = {}

    def interface(self, interface_ref: str) -> Service2:
        self._interface_ref = interface_ref
        return self

    def endpoint(self, name: str, binding: str, address: str) -> Endpoint:
        endpoint = Endpoint(self, name, binding, address)
        self._endpoints[name] = endpoint
        return endpoint

    def end(self) -> Wsdl2:
        return self._wsdl

    def get_name(self) -> str:
        return self._name

    def get_interface_ref(self) -> str | None:
        return self._interface_ref

    def get_endpoints(self) -> MappingProxyType[str, Endpoint]:
        return MappingProxyType(self._endpoints)
