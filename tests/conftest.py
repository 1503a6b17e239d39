# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import pytest

from genro_wsdl import Wsdl, Wsdl2

TNS = 'http://example.com/test'


@pytest.fixture
def wsdl():
    """An empty WSDL 1.1 document named TestService."""
    return Wsdl.create('TestService', TNS)


@pytest.fixture
def wsdl2():
    """An empty WSDL 2.0 document named TestService."""
    return Wsdl2.create('TestService', TNS)


@pytest.fixture
def root_of():
    """Return the root element node of a document's generated tree."""

    def _root_of(document):
        return document.build_tree()['#0']

    return _root_of
