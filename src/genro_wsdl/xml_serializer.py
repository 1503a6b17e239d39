# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""XML serialization for XmlTree.

Classes:
    XmlSerializer - serialize an XmlTree to XML text
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING
from xml.dom.minidom import parseString
from xml.sax import saxutils

if TYPE_CHECKING:
    from .xml_node import XmlNode
    from .xml_tree import XmlTree


# =============================================================================
# SERIALIZERS
# =============================================================================


class XmlSerializer:
    """XML serializer for XmlTree.

    Element and attribute names are emitted as given: the generators are
    responsible for declaring every prefix they use.

    Example:
        >>> tree = XmlTree()
        >>> tree.child('wsdl:definitions', {'xmlns:wsdl': WSDL_NS}, name='Demo')
        >>> XmlSerializer.serialize(tree)
        '<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/" name="Demo"/>'
    """

    def __init__(
        self,
        tree: XmlTree,
        encoding: str = 'UTF-8',
        doc_header: bool | str | None = None,
        pretty: bool = False,
    ):
        """Initialize the serializer.

        Args:
            tree: The XmlTree to serialize.
            encoding: XML encoding (default UTF-8).
            doc_header: XML declaration:
                - None/False: No declaration
                - True: Auto-generate with encoding
                - str: Custom declaration string
            pretty: If True, format with two-space indentation.
        """
        self.tree = tree
        self.encoding = encoding
        self.doc_header = doc_header
        self.pretty = pretty

    @classmethod
    def serialize(
        cls,
        tree: XmlTree,
        filename: str | None = None,
        encoding: str = 'UTF-8',
        doc_header: bool | str | None = None,
        pretty: bool = False,
    ) -> str | None:
        """Serialize an XmlTree to an XML string.

        Args:
            tree: The XmlTree to serialize.
            filename: Optional file path to write to. If provided, returns None.
            encoding: XML encoding (default UTF-8).
            doc_header: XML declaration.
            pretty: If True, format with indentation.

        Returns:
            XML string if filename is None, else None (written to file).
        """
        instance = cls(tree=tree, encoding=encoding, doc_header=doc_header, pretty=pretty)
        result = instance._serialize()

        if filename:
            with open(filename, 'wb') as f:
                f.write(result.encode(encoding))
            return None

        return result

    def _serialize(self) -> str:
        """Main serialization logic."""
        content = self._tree_to_xml(self.tree)

        if self.pretty:
            content = self._prettify(content)

        if self.doc_header is True:
            content = f'<?xml version="1.0" encoding="{self.encoding}"?>\n{content}'
        elif isinstance(self.doc_header, str):
            content = f'{self.doc_header}\n{content}'

        return content

    def _prettify(self, xml_str: str) -> str:
        """Format XML with indentation."""
        result = parseString(xml_str).toprettyxml(indent='  ')
        # toprettyxml adds its own declaration
        if result.startswith('<?xml'):
            result = result.split('\n', 1)[1] if '\n' in result else ''
        return result

    def _tree_to_xml(self, tree: XmlTree) -> str:
        return ''.join(self._node_to_xml(node) for node in tree)

    def _node_to_xml(self, node: XmlNode) -> str:
        """Convert an XmlNode to XML string."""
        tag = node.tag
        attrs_parts = [
            f'{k}={saxutils.quoteattr(str(v))}'
            for k, v in node.attr.items()
            if v is not None and v is not False
        ]
        attrs_str = ' ' + ' '.join(attrs_parts) if attrs_parts else ''

        if node.is_branch:
            inner = self._tree_to_xml(node.value)
            if inner:
                return f'<{tag}{attrs_str}>{inner}</{tag}>'
            return f'<{tag}{attrs_str}/>'

        value = node.value
        if value is None or value == '':
            return f'<{tag}{attrs_str}/>'

        text = html.escape(str(value), quote=False)
        return f'<{tag}{attrs_str}>{text}</{tag}>'
