# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""MTOM / XOP: optimized MIME serialization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..namespaces import WSOMA_NS, XOP_NS
from .policy import policy_record


class ContentTransferEncoding(str, Enum):
    BASE64 = 'base64'
    BINARY = 'binary'
    QUOTED_PRINTABLE = 'quoted-printable'
    EIGHT_BIT = '8bit'
    SEVEN_BIT = '7bit'


class MtomPolicy:
    NAMESPACE_URI = WSOMA_NS

    @staticmethod
    def optimized_mime_serialization() -> dict[str, Any]:
        return policy_record('wsoma:OptimizedMimeSerialization', WSOMA_NS)


@dataclass(frozen=True)
class XopInclude:
    """``<xop:Include href>`` reference to a MIME part."""

    href: str

    NAMESPACE_URI = XOP_NS

    @classmethod
    def create(cls, href: str) -> XopInclude:
        return cls(href)
