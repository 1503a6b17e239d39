# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""genro-wsdl: fluent builders for WSDL 1.1, WSDL 2.0 and XML Schema documents.

Documents are assembled through chained calls, where every child builder's
``end()`` returns its parent, and rendered to XML with ``build()``.

Example:
    >>> from genro_wsdl import Wsdl, XsdType
    >>> wsdl = Wsdl.create('Calculator', 'http://example.com/calc')
    >>> wsdl.complex_type('AddRequest') \\
    ...     .element('a', XsdType.INT) \\
    ...     .element('b', XsdType.INT) \\
    ...     .end()
    >>> wsdl.operation('Add').input('a', XsdType.INT).output('result', XsdType.INT).end()
    >>> print(wsdl.build())
"""

from .documentation import Documentation
from .enums import (
    BindingStyle,
    BindingUse,
    DerivationControl,
    MessageExchangePattern,
    SoapVersion,
    XsdType,
)
from .exceptions import InvalidArgumentException, InvalidOperationException, WsdlBuilderException
from .imports import SchemaImport, SchemaInclude, SchemaRedefine, WsdlImport
from .wsdl import Wsdl, WsdlGenerator
from .wsdl2 import Wsdl2, Wsdl2Generator
from .xml_tree import XmlTree

__version__ = '0.1.0'

__all__ = [
    'BindingStyle',
    'BindingUse',
    'DerivationControl',
    'Documentation',
    'InvalidArgumentException',
    'InvalidOperationException',
    'MessageExchangePattern',
    'SchemaImport',
    'SchemaInclude',
    'SchemaRedefine',
    'SoapVersion',
    'Wsdl',
    'Wsdl2',
    'Wsdl2Generator',
    'WsdlBuilderException',
    'WsdlGenerator',
    'XmlTree',
    'XsdType',
]
