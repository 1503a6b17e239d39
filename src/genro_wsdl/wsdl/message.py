# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""``<wsdl:message>`` and its parts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..documentation import Documented
from ..enums import XsdType

if TYPE_CHECKING:
    from .document import Wsdl


@dataclass(frozen=True)
class MessagePart:
    """A message part.

    A type given as 'tns:Name' refers to a schema element and renders as
    ``element=``; anything else renders as ``type=``.
    """

    name: str
    type: XsdType | str

    @property
    def is_element(self) -> bool:
        return not isinstance(self.type, XsdType) and self.type.startswith('tns:')


class Message(Documented):
    def __init__(self, wsdl: Wsdl, name: str) -> None:
        self._wsdl = wsdl
        self._name = name
        self._parts: list[MessagePart] = []

    def part(self, name: str, type: XsdType | str) -> Message:
        self._parts.append(MessagePart(name, type))
        return self

    def end(self) -> Wsdl:
        return self._wsdl

    def get_name(self) -> str:
        return self._name

    def get_parts(self) -> tuple[MessagePart, ...]:
        return tuple(self._parts)
