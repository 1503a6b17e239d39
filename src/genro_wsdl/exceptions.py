# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by the WSDL/XSD builders.

Builders fail fast on local rule violations. Everything else (duplicate
names, dangling references) is accepted silently and reproduced verbatim
by the generators.
"""

from __future__ import annotations


class WsdlBuilderException(Exception):
    """Base exception for all builder errors."""
    pass


class InvalidArgumentException(WsdlBuilderException, ValueError):
    """A value passed to a builder method violates a schema rule."""
    pass


class InvalidOperationException(WsdlBuilderException, RuntimeError):
    """A builder method was called in a state where it cannot apply."""
    pass
