# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""XmlTree module - ordered container of XML elements.

The generators assemble a document as a tree of XmlTree/XmlNode objects and
hand it to XmlSerializer. Each XmlTree is an ordered, label-keyed list of
XmlNodes; a node whose value is an XmlTree is an element with children.

Labels are generated from the tag ('xsd:element_0', 'xsd:element_1', ...)
so sibling elements with the same tag never collide, and nested elements
can be reached with dot-separated label paths.

Example:
    >>> tree = XmlTree()
    >>> root = tree.child('wsdl:definitions', name='Demo')
    >>> root.child('wsdl:message', name='Ping')
    >>> tree.get_node('wsdl:definitions_0.wsdl:message_0').attr['name']
    'Ping'
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from genro_toolbox import smartsplit

from .node_container import NodeContainer
from .xml_node import XmlNode


class XmlTree:
    """Ordered container of XmlNodes.

    Attributes:
        parent_node: The XmlNode whose value is this tree (None for the root).
    """

    def __init__(self) -> None:
        self._nodes = NodeContainer()
        self.parent_node: XmlNode | None = None

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[XmlNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, label: str) -> bool:
        return label in self._nodes

    def __getitem__(self, key: str | int) -> XmlNode | None:
        return self._nodes[key]

    def keys(self) -> list[str]:
        return self._nodes.keys()

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def child(
        self,
        tag: str,
        value: Any = None,
        attributes: dict[str, Any] | None = None,
        node_position: str | int | None = None,
        **attr: Any,
    ) -> XmlNode:
        """Create a child element in this tree.

        Args:
            tag: Qualified element name.
            value: Text content, or an XmlTree of children.
            attributes: Attributes as an ordered dict. Use it for qualified
                names ('xmlns:tns', 'xml:lang').
            node_position: Where to insert ('<' first, '>' last, '<label',
                '>label', '#n', int). Defaults to append.
            **attr: Additional attributes, added after ``attributes``.

        Returns:
            The new XmlNode.
        """
        n = 0
        while f'{tag}_{n}' in self._nodes:
            n += 1
        label = f'{tag}_{n}'

        merged = dict(attributes or {})
        merged.update(attr)
        node = XmlNode(self, label, tag, value=value, attr=merged)
        self._nodes.set(label, node, _position=node_position)
        return node

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get_node(self, path: str) -> XmlNode | None:
        """Return the node at a dot-separated label path, or None.

        Each segment is a label ('xsd:element_1'), a positional index ('#1')
        or an attribute match ('?name=GetUser').
        """
        pathlist = [x for x in smartsplit(path, '.') if x]
        curr: XmlTree | None = self
        node = None
        for segment in pathlist:
            if curr is None:
                return None
            node = curr[segment]
            if node is None:
                return None
            curr = node.value if node.is_branch else None
        return node

    def walk(self, _path: str = '') -> Iterator[tuple[str, XmlNode]]:
        """Yield (path, node) for every element, depth-first in document order."""
        for node in self._nodes:
            path = f'{_path}.{node.label}' if _path else node.label
            yield path, node
            if node.is_branch:
                yield from node.value.walk(path)

    def find_all(self, tag: str) -> list[XmlNode]:
        """Return every element with the given tag, in document order."""
        return [node for _, node in self.walk() if node.tag == tag]

    def digest(self, what: str = '#k', condition: Callable[[XmlNode], bool] | None = None) -> list:
        """Return a per-node list of labels, tags, texts or attributes.

        Args:
            what: Comma-separated keys:
                - '#k': label
                - '#t': tag
                - '#v': text value
                - '#a.attrname': attribute value
            condition: Optional filter on nodes.

        Returns:
            A flat list for a single key, else a list of tuples.
        """
        nodes = [n for n in self._nodes if condition is None or condition(n)]
        result = []
        for w in (x.strip() for x in what.split(',')):
            if w == '#k':
                result.append([n.label for n in nodes])
            elif w == '#t':
                result.append([n.tag for n in nodes])
            elif w == '#v':
                result.append([n.text for n in nodes])
            elif w.startswith('#a.'):
                attr = w[3:]
                result.append([n.get_attr(attr) for n in nodes])
        if len(result) == 1:
            return result.pop()
        return list(zip(*result, strict=False))

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_xml(self, **kwargs: Any) -> str | None:
        """Serialize to XML. Keyword arguments are passed to XmlSerializer.serialize."""
        from .xml_serializer import XmlSerializer

        return XmlSerializer.serialize(self, **kwargs)
