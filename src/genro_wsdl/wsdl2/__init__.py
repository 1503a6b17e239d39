# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WSDL 2.0 document builder."""

from .binding import Binding2, BindingFault2, BindingOperation2
from .document import Wsdl2
from .generator import Wsdl2Generator
from .interface import Interface, InterfaceFault, InterfaceOperation
from .service import Endpoint, Service2

__all__ = [
    'Binding2',
    'BindingFault2',
    'BindingOperation2',
    'Endpoint',
    'Interface',
    'InterfaceFault',
    'InterfaceOperation',
    'Service2',
    'Wsdl2',
    'Wsdl2Generator',
]
