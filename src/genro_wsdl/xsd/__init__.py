# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""XML Schema builders shared by the WSDL 1.1 and WSDL 2.0 documents."""

from .annotations import Annotation, AppInfo
from .attributes import AnyAttribute, Attribute, AttributeGroup
from .complex_type import ComplexType
from .compositors import All, Any, Choice
from .constraints import Field, IdentityConstraint, Key, KeyRef, Selector, Unique
from .derived_types import ListType, UnionType
from .element import UNBOUNDED, Element
from .groups import ElementGroup
from .simple_content import SimpleContent
from .simple_type import SimpleType
from .writer import SchemaWriter

__all__ = [
    'UNBOUNDED',
    'All',
    'Annotation',
    'Any',
    'AnyAttribute',
    'AppInfo',
    'Attribute',
    'AttributeGroup',
    'Choice',
    'ComplexType',
    'Element',
    'ElementGroup',
    'Field',
    'IdentityConstraint',
    'Key',
    'KeyRef',
    'ListType',
    'Selector',
    'SchemaWriter',
    'SimpleContent',
    'SimpleType',
    'UnionType',
    'Unique',
]
