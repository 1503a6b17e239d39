# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""``<wsdl:service>`` and its ports."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..documentation import Documented
from ..extensions.policy import PolicyAttachment

if TYPE_CHECKING:
    from .document import Wsdl


@dataclass(frozen=True)
class Port:
    """A port: a binding name (without prefix) exposed at a SOAP address."""

    name: str
    binding: str
    address: str


class Service(PolicyAttachment, Documented):
    def __init__(self, wsdl: Wsdl, name: str) -> None:
        super().__init__()
        self._wsdl = wsdl
        self._name = name
        self._ports: dict[str, Port] = {}

    def port(self, name: str, binding: str, address: str) -> Service:
        self._ports[name] = Port(name, binding, address)
        return self

    def end(self) -> Wsdl:
        return self._wsdl

    def get_name(self) -> str:
        return self._name

    def get_ports(self) -> MappingProxyType[str, Port]:
        return MappingProxyType(self._ports)
