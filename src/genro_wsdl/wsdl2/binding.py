# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WSDL 2.0 ``<binding>`` with its operation and fault bindings."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from ..documentation import Documented

if TYPE_CHECKING:
    from .document import Wsdl2


class BindingOperation2(Documented):
    def __init__(self, binding: Binding2, ref: str) -> None:
        self._binding = binding
        self._ref = ref
        self._soap_action: str | None = None

    def soap_action(self, action: str) -> BindingOperation2:
        self._soap_action = action
        return self

    def end(self) -> Binding2:
        return self._binding

    def get_ref(self) -> str:
        return self._ref

    def get_soap_action(self) -> str | None:
        return self._soap_action


class BindingFault2(Documented):
    def __init__(self, binding: Binding2, ref: str) -> None:
        self._binding = binding
        self._ref = ref

    def end(self) -> Binding2:
        return self._binding

    def get_ref(self) -> str:
        return self._ref


class Binding2(Documented):
    """Binding of an interface (name without prefix) to a concrete protocol."""

    def __init__(self, wsdl: Wsdl2, name: str, interface_ref: str) -> None:
        self._wsdl = wsdl
        self._name = name
        self._interface_ref = interface_ref
        self._type: str | None = None
        self._protocol: str | None = None
        self._operations: dict[str, BindingOperation2] = {}
        self._faults: dict[str, BindingFault2] = {}

    def type(self, binding_type: str) -> Binding2:
        """Set the binding type URI (e.g. the WSDL 2.0 SOAP namespace)."""
        self._type = binding_type
        return self

    def protocol(self, uri: str) -> Binding2:
        """Set ``wsoap:protocol`` (e.g. the SOAP 1.2 HTTP binding URI)."""
        self._protocol = uri
        return self

    def operation(self, ref: str) -> BindingOperation2:
        operation = BindingOperation2(self, ref)
        self._operations[ref] = operation
        return operation

    def fault(self, ref: str) -> BindingFault2:
        fault = BindingFault2(self, ref)
        self._faults[ref] = fault
        return fault

    def end(self) -> Wsdl2:
        return self._wsdl

    def get_name(self) -> str:
        return self._name

    def get_interface_ref(self) -> str:
        return self._interface_ref

    def get_type(self) -> str | None:
        return self._type

    def get_protocol(self) -> str | None:
        return self._protocol

    def get_operations(self) -> MappingProxyType[str, BindingOperation2]:
        return MappingProxyType(self._operations)

    def get_faults(self) -> MappingProxyType[str, BindingFault2]:
        return MappingProxyType(self._faults)

    def uses_soap(self) -> bool:
        """True if rendering this binding needs the wsoap namespace."""
        if self._protocol is not None:
            return True
        return any(op.get_soap_action() is not None for op in self._operations.values())
