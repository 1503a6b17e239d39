# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""MIME binding extension: ``<mime:multipartRelated>`` attachments.

Example:
    >>> binding.operation('Upload', 'urn:Upload') \\
    ...     .input_mime() \\
    ...         .soap_body_part() \\
    ...         .mime_part('file', 'application/octet-stream') \\
    ...     .end()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..namespaces import MIME_NS


@dataclass(frozen=True)
class MimeContent:
    """``<mime:content part? type?>``."""

    part: str | None = None
    type: str | None = None

    namespace = MIME_NS

    @classmethod
    def create(cls, part: str | None = None, type: str | None = None) -> MimeContent:
        return cls(part, type)

    def get_part(self) -> str | None:
        return self.part

    def get_type(self) -> str | None:
        return self.type


@dataclass(frozen=True)
class MimeXml:
    """``<mime:mimeXml part?>``."""

    part: str | None = None

    @classmethod
    def create(cls, part: str | None = None) -> MimeXml:
        return cls(part)

    def get_part(self) -> str | None:
        return self.part


class MimePart:
    """``<mime:part name?>`` holding a content description and/or a SOAP body."""

    def __init__(self, name: str | None = None, parent: Any = None) -> None:
        self._name = name
        self._parent = parent
        self._mime_content: MimeContent | None = None
        self._soap_body = False

    @classmethod
    def create(cls, name: str | None = None, parent: Any = None) -> MimePart:
        return cls(name, parent)

    def content(self, part: str, type: str) -> MimePart:
        self._mime_content = MimeContent(part, type)
        return self

    def set_mime_content(self, content: MimeContent) -> MimePart:
        self._mime_content = content
        return self

    def soap_body(self, has_soap_body: bool = True) -> MimePart:
        self._soap_body = has_soap_body
        return self

    def get_name(self) -> str | None:
        return self._name

    def get_mime_content(self) -> MimeContent | None:
        return self._mime_content

    def has_soap_body(self) -> bool:
        return self._soap_body

    def end(self) -> Any:
        return self._parent


class MimeMultipartRelated:
    """``<mime:multipartRelated>``: an ordered list of MIME parts."""

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._parts: list[MimePart] = []

    @classmethod
    def create(cls, parent: Any = None) -> MimeMultipartRelated:
        return cls(parent)

    def part(self, name: str | None = None) -> MimePart:
        """Append an empty part and return it."""
        part = MimePart(name, self)
        self._parts.append(part)
        return part

    def mime_part(self, part: str, content_type: str) -> MimeMultipartRelated:
        self._parts.append(MimePart(None, self).content(part, content_type))
        return self

    def mime_part_named(self, name: str, part: str, content_type: str) -> MimeMultipartRelated:
        self._parts.append(MimePart(name, self).content(part, content_type))
        return self

    def soap_body_part(self) -> MimeMultipartRelated:
        self._parts.append(MimePart(None, self).soap_body())
        return self

    def add_part(self, part: MimePart) -> MimeMultipartRelated:
        self._parts.append(part)
        return self

    def get_parts(self) -> tuple[MimePart, ...]:
        return tuple(self._parts)

    def end(self) -> Any:
        return self._parent
