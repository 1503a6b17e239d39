# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""XmlNode module - individual elements in an XmlTree.

An XmlNode is one XML element: a label that identifies it within its parent
tree, the qualified tag name to emit, an ordered attribute dict and a value.
The value is either text or a nested XmlTree holding child elements.

Attributes set to None are dropped on assignment, so optional schema
attributes can be passed unconditionally and still be omitted from output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from genro_toolbox import safe_is_instance

if TYPE_CHECKING:
    from .xml_tree import XmlTree


class XmlNode:
    """A single XML element.

    Attributes:
        label: The node's unique key within its parent tree.
        tag: The qualified element name (e.g. 'xsd:element').
        parent_tree: The XmlTree containing this node.
    """

    __slots__ = ('label', 'tag', '_attr', '_value', 'parent_tree')

    def __init__(
        self,
        parent_tree: XmlTree | None,
        label: str,
        tag: str,
        value: Any = None,
        attr: dict[str, Any] | None = None,
    ) -> None:
        self.label = label
        self.tag = tag
        self.parent_tree = parent_tree
        self._attr: dict[str, Any] = {}
        self._value: Any = None
        if attr:
            self.set_attr(attr)
        if value is not None:
            self.value = value

    def __repr__(self) -> str:
        return f'XmlNode({self.tag!r}, attr={self._attr!r})'

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    @property
    def attr(self) -> dict[str, Any]:
        return self._attr

    def set_attr(self, attr: dict[str, Any] | None = None, **kwargs: Any) -> None:
        """Set attributes, preserving insertion order.

        Args:
            attr: Attributes as a dict (needed for qualified names such as
                'xmlns:tns' that are not valid keyword arguments).
            **kwargs: Additional attributes.
        """
        merged = dict(attr or {})
        merged.update(kwargs)
        for name, value in merged.items():
            if value is None:
                self._attr.pop(name, None)
            else:
                self._attr[name] = value

    def get_attr(self, name: str, default: Any = None) -> Any:
        return self._attr.get(name, default)

    # -------------------------------------------------------------------------
    # Value
    # -------------------------------------------------------------------------

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        if safe_is_instance(value, 'genro_wsdl.xml_tree.XmlTree'):
            value.parent_node = self
        self._value = value

    @property
    def is_branch(self) -> bool:
        """True if the value is a tree of child elements."""
        return safe_is_instance(self._value, 'genro_wsdl.xml_tree.XmlTree')

    @property
    def text(self) -> str | None:
        """Text content, or None for branch or empty nodes."""
        if self._value is None or self.is_branch:
            return None
        return str(self._value)

    def child(
        self,
        tag: str,
        value: Any = None,
        attributes: dict[str, Any] | None = None,
        node_position: str | int | None = None,
        **attr: Any,
    ) -> XmlNode:
        """Append a child element under this node.

        The node's value becomes an XmlTree on first use. See XmlTree.child.
        """
        if not self.is_branch:
            from .xml_tree import XmlTree

            self.value = XmlTree()
        return self._value.child(tag, value, attributes=attributes, node_position=node_position, **attr)

    @property
    def children(self) -> list[XmlNode]:
        """Child elements in document order (empty for leaf nodes)."""
        if not self.is_branch:
            return []
        return list(self._value)

    def get_node(self, path: str) -> XmlNode | None:
        """Resolve a dotted label path below this node."""
        if not self.is_branch:
            return None
        return self._value.get_node(path)

    def digest(self, what: str = '#k') -> list:
        """Digest of the child elements (see XmlTree.digest)."""
        if not self.is_branch:
            return []
        return self._value.digest(what)
