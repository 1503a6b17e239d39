# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-Addressing: per-operation actions and endpoint references."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any


class AddressingVersion(str, Enum):
    ADDRESSING_2004 = 'http://schemas.xmlsoap.org/ws/2004/08/addressing'
    ADDRESSING_2005 = 'http://www.w3.org/2005/08/addressing'
    ADDRESSING_WSDL = 'http://www.w3.org/2006/05/addressing/wsdl'


@dataclass(frozen=True)
class Action:
    """Action URIs of one operation: input, optional output, and faults by name."""

    input_action: str
    output_action: str | None = None
    fault_actions: MappingProxyType[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def with_fault(self, fault_name: str, uri: str) -> Action:
        """Return a copy with ``fault_name`` mapped to ``uri``."""
        faults = dict(self.fault_actions)
        faults[fault_name] = uri
        return replace(self, fault_actions=MappingProxyType(faults))


class ReferenceParameters:
    """``<wsa:ReferenceParameters>`` entries of an endpoint reference."""

    def __init__(self, parent: EndpointReference) -> None:
        self._parent = parent
        self._parameters: list[dict[str, str]] = []

    def parameter(self, namespace: str, local_name: str, value: str) -> ReferenceParameters:
        self._parameters.append({'namespace': namespace, 'localName': local_name, 'value': value})
        return self

    def get_parameters(self) -> tuple[dict[str, str], ...]:
        return tuple(self._parameters)

    def end(self) -> EndpointReference:
        return self._parent


class AddressingMetadata:
    """``<wsa:Metadata>`` items of an endpoint reference."""

    def __init__(self, parent: EndpointReference) -> None:
        self._parent = parent
        self._items: list[dict[str, Any]] = []

    def add(self, namespace: str, local_name: str, content: Any) -> AddressingMetadata:
        self._items.append({'namespace': namespace, 'localName': local_name, 'content': content})
        return self

    def get_items(self) -> tuple[dict[str, Any], ...]:
        return tuple(self._items)

    def end(self) -> EndpointReference:
        return self._parent


class EndpointReference:
    """An endpoint address with lazily created parameters and metadata."""

    def __init__(self, address: str) -> None:
        self._address = address
        self._reference_parameters: ReferenceParameters | None = None
        self._metadata: AddressingMetadata | None = None

    def reference_parameters(self) -> ReferenceParameters:
        if self._reference_parameters is None:
            self._reference_parameters = ReferenceParameters(self)
        return self._reference_parameters

    def metadata(self) -> AddressingMetadata:
        if self._metadata is None:
            self._metadata = AddressingMetadata(self)
        return self._metadata

    def get_address(self) -> str:
        return self._address

    def get_reference_parameters(self) -> ReferenceParameters | None:
        return self._reference_parameters

    def get_metadata(self) -> AddressingMetadata | None:
        return self._metadata

    def to_dict(self) -> dict[str, Any]:
        config: dict[str, Any] = {'address': self._address}
        if self._reference_parameters is not None:
            config['referenceParameters'] = list(self._reference_parameters.get_parameters())
        if self._metadata is not None:
            config['metadata'] = list(self._metadata.get_items())
        return config
