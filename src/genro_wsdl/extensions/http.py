# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WSDL 1.1 HTTP binding extension elements."""

from __future__ import annotations

from dataclasses import dataclass

from ..namespaces import HTTP_BINDING_NS


@dataclass(frozen=True)
class HttpBinding:
    """``<http:binding verb>``."""

    verb: str

    namespace = HTTP_BINDING_NS

    @classmethod
    def create(cls, verb: str) -> HttpBinding:
        return cls(verb)

    @classmethod
    def get(cls) -> HttpBinding:
        return cls('GET')

    @classmethod
    def post(cls) -> HttpBinding:
        return cls('POST')

    @classmethod
    def put(cls) -> HttpBinding:
        return cls('PUT')

    @classmethod
    def delete(cls) -> HttpBinding:
        return cls('DELETE')


@dataclass(frozen=True)
class HttpOperation:
    """``<http:operation location>``."""

    location: str

    @classmethod
    def create(cls, location: str) -> HttpOperation:
        return cls(location)


@dataclass(frozen=True)
class HttpUrlEncoded:
    """``<http:urlEncoded/>``: input parts sent as query parameters."""

    @classmethod
    def create(cls) -> HttpUrlEncoded:
        return cls()


@dataclass(frozen=True)
class HttpUrlReplacement:
    """``<http:urlReplacement/>``: input parts substituted into the location."""

    @classmethod
    def create(cls) -> HttpUrlReplacement:
        return cls()
