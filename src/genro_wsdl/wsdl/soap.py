# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""SOAP headers declared on binding operation inputs."""

from __future__ import annotations

from ..enums import BindingUse
from ..validations import EnumValue

binding_use = EnumValue(BindingUse)


class _HeaderBase:
    def __init__(self, message: str, part: str) -> None:
        self._message = message
        self._part = part
        self._use = BindingUse.LITERAL
        self._namespace: str | None = None
        self._encoding_style: str | None = None
        self._required = False

    def use(self, use: BindingUse | str):
        self._use = binding_use(use)
        return self

    def namespace(self, namespace: str):
        self._namespace = namespace
        return self

    def encoding_style(self, style: str):
        self._encoding_style = style
        return self

    def required(self, required: bool = True):
        self._required = required
        return self

    def get_message(self) -> str:
        return self._message

    def get_part(self) -> str:
        return self._part

    def get_use(self) -> BindingUse:
        return self._use

    def get_namespace(self) -> str | None:
        return self._namespace

    def get_encoding_style(self) -> str | None:
        return self._encoding_style

    def is_required(self) -> bool:
        return self._required


class HeaderFault(_HeaderBase):
    """``<soap:headerfault>``."""


class Header(_HeaderBase):
    """``<soap:header>`` with optional header faults."""

    def __init__(self, message: str, part: str) -> None:
        super().__init__(message, part)
        self._header_faults: list[HeaderFault] = []

    def header_fault(self, message: str, part: str) -> HeaderFault:
        fault = HeaderFault(message, part)
        self._header_faults.append(fault)
        return fault

    def get_header_faults(self) -> tuple[HeaderFault, ...]:
        return tuple(self._header_faults)
