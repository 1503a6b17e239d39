# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WSDL 2.0 ``<interface>``: faults and operations bound to message exchange patterns."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..documentation import Documented
from ..enums import MessageExchangePattern, enum_text

if TYPE_CHECKING:
    from .document import Wsdl2


@dataclass(frozen=True)
class InterfaceFault:
    """An interface-level fault referring to a schema element (name without prefix)."""

    name: str
    element: str


class InterfaceOperation(Documented):
    def __init__(self, interface: Interface, name: str) -> None:
        self._interface = interface
        self._name = name
        self._pattern: str | None = None
        self._input: str | None = None
        self._output: str | None = None
        self._faults: list[str] = []
        self._style: str | None = None
        self._safe = False

    def pattern(self, mep: MessageExchangePattern | str) -> InterfaceOperation:
        """Set the message exchange pattern URI."""
        self._pattern = enum_text(mep)
        return self

    def input(self, element: str) -> InterfaceOperation:
        self._input = element
        return self

    def output(self, element: str) -> InterfaceOperation:
        self._output = element
        return self

    def fault(self, ref: str) -> InterfaceOperation:
        """Reference an interface fault; rendered as ``<wsdl:outfault>``."""
        self._faults.append(ref)
        return self

    def style(self, uri: str) -> InterfaceOperation:
        self._style = uri
        return self

    def safe(self, safe: bool = True) -> InterfaceOperation:
        self._safe = safe
        return self

    def end(self) -> Interface:
        return self._interface

    def get_name(self) -> str:
        return self._name

    def get_pattern(self) -> str | None:
        return self._pattern

    def get_input(self) -> str | None:
        return self._input

    def get_output(self) -> str | None:
        return self._output

    def get_faults(self) -> tuple[str, ...]:
        return tuple(self._faults)

    def get_style(self) -> str | None:
        return self._style

    def is_safe(self) -> bool:
        return self._safe


class Interface(Documented):
    def __init__(self, wsdl: Wsdl2, name: str) -> None:
        self._wsdl = wsdl
        self._name = name
        self._extends: list[str] = []
        self._faults: dict[str, InterfaceFault] = {}
        self._operations: dict[str, InterfaceOperation] = {}

    def extends(self, interface_name: str) -> Interface:
        """Add a base interface; repeated calls accumulate."""
        self._extends.append(interface_name)
        return self

    def fault(self, name: str, element: str) -> Interface:
        self._faults[name] = InterfaceFault(name, element)
        return self

    def operation(self, name: str) -> InterfaceOperation:
        operation = InterfaceOperation(self, name)
        self._operations[name] = operation
        return operation

    def end(self) -> Wsdl2:
        return self._wsdl

    def get_name(self) -> str:
        return self._name

    def get_extends(self) -> tuple[str, ...]:
        return tuple(self._extends)

    def get_faults(self) -> MappingProxyType[str, InterfaceFault]:
        return MappingProxyType(self._faults)

    def get_operations(self) -> MappingProxyType[str, InterfaceOperation]:
        return MappingProxyType(self._operations)
