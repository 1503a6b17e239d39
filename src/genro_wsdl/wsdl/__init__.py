# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WSDL 1.1 document builder."""

from .binding import Binding, BindingOperation
from .document import Wsdl
from .generator import WsdlGenerator
from .message import Message, MessagePart
from .operations import Notification, OneWay, Operation
from .port_type import PortType, PortTypeOperation
from .service import Port, Service
from .soap import Header, HeaderFault

__all__ = [
    'Binding',
    'BindingOperation',
    'Header',
    'HeaderFault',
    'Message',
    'MessagePart',
    'Notification',
    'OneWay',
    'Operation',
    'Port',
    'PortType',
    'PortTypeOperation',
    'Service',
    'Wsdl',
    'WsdlGenerator',
]
