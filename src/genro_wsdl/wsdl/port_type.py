# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""``<wsdl:portType>``: abstract operations and their addressing actions."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..documentation import Documented
from ..exceptions import InvalidOperationException
from ..extensions.addressing import Action

if TYPE_CHECKING:
    from .document import Wsdl


@dataclass(frozen=True)
class PortTypeOperation:
    """An abstract operation. Messages are names without prefix; None omits the element."""

    name: str
    input: str | None
    output: str | None
    fault: str | None = None


class AddressingActions:
    """Mixin holding the WS-Addressing flag and per-operation actions."""

    def _init_addressing(self) -> None:
        self._using_addressing = False
        self._actions: dict[str, Action] = {}

    def using_addressing(self, enabled: bool = True):
        self._using_addressing = enabled
        return self

    def action(self, operation_name: str, input: str, output: str | None = None):
        """Set the input and output action URIs of an operation (replaces fault actions)."""
        self._actions[operation_name] = Action(input, output)
        return self

    def fault_action(self, operation_name: str, fault_name: str, uri: str):
        """Add a fault action to an operation that already has an action.

        Raises:
            InvalidOperationException: If ``action()`` was not called for the operation.
        """
        existing = self._actions.get(operation_name)
        if existing is None:
            raise InvalidOperationException(
                f"No action defined for operation '{operation_name}'. Call action() first."
            )
        self._actions[operation_name] = existing.with_fault(fault_name, uri)
        return self

    def is_using_addressing(self) -> bool:
        return self._using_addressing

    def get_actions(self) -> MappingProxyType[str, Action]:
        return MappingProxyType(self._actions)

    def uses_addressing(self) -> bool:
        """True if the wsaw namespace is needed for this construct."""
        return self._using_addressing or bool(self._actions)


class PortType(AddressingActions, Documented):
    def __init__(self, wsdl: Wsdl, name: str) -> None:
        self._wsdl = wsdl
        self._name = name
        self._operations: dict[str, PortTypeOperation] = {}
        self._init_addressing()

    def operation(
        self, name: str, input: str | None, output: str | None, fault: str | None = None
    ) -> PortType:
        """Register an operation by name (replaces an operation with the same name)."""
        self._operations[name] = PortTypeOperation(name, input or None, output or None, fault)
        return self

    def end(self) -> Wsdl:
        return self._wsdl

    def get_name(self) -> str:
        return self._name

    def get_operations(self) -> MappingProxyType[str, PortTypeOperation]:
        return MappingProxyType(self._operations)
