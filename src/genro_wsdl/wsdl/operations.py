# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Operation shorthand: one call chain producing types, messages, portType and binding.

``Wsdl.operation('GetUser')`` collects input, output and fault elements;
``end()`` then materializes, for an operation named Op in a document
named Svc:

    - complex types OpRequest and OpResponse holding the collected elements
    - messages OpInput and OpOutput with a ``parameters`` part
    - with faults, an OpFault complex type and an OpFault message
    - the operation on portType SvcPortType and binding SvcBinding,
      both created on first use

``OneWay`` produces no response and ``Notification`` no request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..enums import XsdType
from ..exceptions import InvalidOperationException
from ..extensions.addressing import Action

if TYPE_CHECKING:
    from .document import Wsdl

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationElement:
    name: str
    type: XsdType | str


class _OperationShorthand:
    has_input = True
    has_output = True

    def __init__(self, wsdl: Wsdl, name: str) -> None:
        self._wsdl = wsdl
        self._name = name
        self._inputs: list[OperationElement] = []
        self._outputs: list[OperationElement] = []
        self._faults: list[OperationElement] = []
        self._soap_action: str | None = None
        self._action: Action | None = None

    def soap_action(self, action: str):
        self._soap_action = action
        return self

    def end(self) -> Wsdl:
        """Materialize the operation into the document and return it."""
        wsdl = self._wsdl
        name = self._name
        input_message = output_message = fault_message = None

        if self.has_input:
            request = wsdl.complex_type(f'{name}Request')
            for element in self._inputs:
                request.element(element.name, element.type)
            input_message = f'{name}Input'
            wsdl.message(input_message).part('parameters', f'tns:{name}Request')

        if self.has_output:
            response = wsdl.complex_type(f'{name}Response')
            for element in self._outputs:
                response.element(element.name, element.type)
            output_message = f'{name}Output'
            wsdl.message(output_message).part('parameters', f'tns:{name}Response')

        if self._faults:
            fault_message = f'{name}Fault'
            fault_type = wsdl.complex_type(fault_message)
            for element in self._faults:
                fault_type.element(element.name, element.type)
            wsdl.message(fault_message).part('fault', f'tns:{fault_message}')

        port_type_name = f'{wsdl.get_name()}PortType'
        port_type = wsdl.get_port_types().get(port_type_name)
        if port_type is None:
            port_type = wsdl.port_type(port_type_name)
        port_type.operation(name, input_message, output_message, fault_message)

        binding_name = f'{wsdl.get_name()}Binding'
        binding = wsdl.get_bindings().get(binding_name)
        if binding is None:
            binding = wsdl.binding(binding_name, port_type_name)
        binding.operation(name, self._soap_action or f'{wsdl.get_target_namespace()}/{name}')

        if self._action is not None:
            for target in (port_type, binding):
                target.action(name, self._action.input_action, self._action.output_action)
                for fault_name, uri in self._action.fault_actions.items():
                    target.fault_action(name, fault_name, uri)

        logger.debug('Operation %s added to %s and %s', name, port_type_name, binding_name)
        return wsdl

    def get_name(self) -> str:
        return self._name

    def get_inputs(self) -> tuple[OperationElement, ...]:
        return tuple(self._inputs)

    def get_outputs(self) -> tuple[OperationElement, ...]:
        return tuple(self._outputs)

    def get_faults(self) -> tuple[OperationElement, ...]:
        return tuple(self._faults)

    def get_soap_action(self) -> str | None:
        return self._soap_action

    def get_action(self) -> Action | None:
        return self._action


class Operation(_OperationShorthand):
    """Request/response operation."""

    def input(self, name: str, type: XsdType | str) -> Operation:
        self._inputs.append(OperationElement(name, type))
        return self

    def output(self, name: str, type: XsdType | str) -> Operation:
        self._outputs.append(OperationElement(name, type))
        return self

    def fault(self, name: str, type: XsdType | str) -> Operation:
        self._faults.append(OperationElement(name, type))
        return self

    def action(self, input: str, output: str | None = None) -> Operation:
        """Set WS-Addressing actions, copied to the portType and the binding on ``end()``."""
        self._action = Action(input, output)
        return self

    def fault_action(self, fault_name: str, uri: str) -> Operation:
        """Add a fault action.

        Raises:
            InvalidOperationException: If ``action()`` was not called first.
        """
        if self._action is None:
            raise InvalidOperationException(
                f"No action defined for operation '{self._name}'. Call action() first."
            )
        self._action = self._action.with_fault(fault_name, uri)
        return self


class OneWay(_OperationShorthand):
    """Input-only operation: no response type, no output message."""

    has_output = False

    def input(self, name: str, type: XsdType | str) -> OneWay:
        self._inputs.append(OperationElement(name, type))
        return self


class Notification(_OperationShorthand):
    """Output-only operation: no request type, no input message."""

    has_input = False

    def output(self, name: str, type: XsdType | str) -> Notification:
        self._outputs.append(OperationElement(name, type))
        return self
