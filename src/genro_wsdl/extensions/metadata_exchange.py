# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-MetadataExchange: metadata requests, sets, sections and references.

A section's content is either text (an inline document) or a structured
mapping; plain ``str`` / ``dict`` values are wrapped on construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Union

from ..namespaces import MEX_NS, WSDL_NS, XSD_NS
from .addressing import EndpointReference
from .policy import policy_record


class MetadataDialect(str, Enum):
    WSDL = WSDL_NS
    XML_SCHEMA = XSD_NS
    POLICY = 'http://schemas.xmlsoap.org/ws/2004/09/policy'
    MEX = MEX_NS


@dataclass(frozen=True)
class TextContent:
    text: str

    def to_dict(self) -> str:
        return self.text


@dataclass(frozen=True)
class StructuredContent:
    mapping: Mapping[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return dict(self.mapping)


SectionContent = Union[TextContent, StructuredContent]


def as_section_content(content: SectionContent | str | Mapping[str, Any]) -> SectionContent:
    if isinstance(content, (TextContent, StructuredContent)):
        return content
    if isinstance(content, str):
        return TextContent(content)
    return StructuredContent(MappingProxyType(dict(content)))


@dataclass(frozen=True)
class GetMetadata:
    dialect: MetadataDialect
    identifier: str | None = None

    def to_dict(self) -> dict[str, str]:
        result = {'dialect': self.dialect.value}
        if self.identifier is not None:
            result['identifier'] = self.identifier
        return result


@dataclass(frozen=True)
class MetadataSection:
    dialect: str
    content: SectionContent
    identifier: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'content', as_section_content(self.content))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {'dialect': self.dialect, 'content': self.content.to_dict()}
        if self.identifier is not None:
            result['identifier'] = self.identifier
        return result


class MetadataSet:
    """A ``mex:Metadata`` set of sections."""

    def __init__(self, sections: list[MetadataSection] | None = None) -> None:
        self._sections = list(sections or [])

    def add_section(self, section: MetadataSection) -> MetadataSet:
        self._sections.append(section)
        return self

    def get_sections(self) -> tuple[MetadataSection, ...]:
        return tuple(self._sections)

    def to_dict(self) -> dict[str, Any]:
        return {'metadataSections': [section.to_dict() for section in self._sections]}


class MetadataReference:
    """Endpoint from which a metadata section can be retrieved."""

    def __init__(self, address: EndpointReference,
                 reference_properties: Mapping[str, Any] | None = None) -> None:
        self._address = address
        self._reference_properties = dict(reference_properties or {})

    def add_reference_property(self, name: str, value: Any) -> MetadataReference:
        self._reference_properties[name] = value
        return self

    def get_address(self) -> EndpointReference:
        return self._address

    def get_reference_properties(self) -> dict[str, Any]:
        return dict(self._reference_properties)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {'address': self._address.to_dict()}
        if self._reference_properties:
            result['referenceProperties'] = dict(self._reference_properties)
        return result


class MetadataExchangePolicy:
    NAMESPACE_URI = MEX_NS

    @staticmethod
    def get_metadata_supported() -> dict[str, Any]:
        return policy_record('mex:GetMetadataSupported', MEX_NS)

    @staticmethod
    def metadata_exchange() -> dict[str, Any]:
        return policy_record('mex:MetadataExchange', MEX_NS)

    @staticmethod
    def get_metadata_request(dialects: list[str] | None = None) -> dict[str, Any]:
        return policy_record('mex:GetMetadataRequest', MEX_NS, dialects=list(dialects) if dialects else None)
