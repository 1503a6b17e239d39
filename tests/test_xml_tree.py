# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for the XML document assembly layer: NodeContainer, XmlTree, XmlNode, XmlSerializer."""

from genro_wsdl.node_container import NodeContainer
from genro_wsdl.xml_node import XmlNode
from genro_wsdl.xml_serializer import XmlSerializer
from genro_wsdl.xml_tree import XmlTree


def _node(label, **attr):
    return XmlNode(None, label, label, attr=attr)


class TestNodeContainer:
    """Ordered storage with label, index and positional access."""

    def test_access_syntaxes_are_equivalent(self):
        """Label, numeric index and '#n' reach the same node."""
        c = NodeContainer()
        for label in ('a', 'b', 'c'):
            c.set(label, _node(label))
        assert c['b'] is c[1] is c['#1']

    def test_missing_keys_return_none(self):
        """Unknown labels and out-of-range indexes return None."""
        c = NodeContainer()
        c.set('a', _node('a'))
        assert c['zzz'] is None
        assert c[5] is None
        assert c['#9'] is None

    def test_insert_first(self):
        """'<' inserts at the beginning."""
        c = NodeContainer()
        c.set('a', _node('a'))
        c.set('b', _node('b'), _position='<')
        assert c.keys() == ['b', 'a']

    def test_insert_relative_to_label(self):
        """'<label' and '>label' insert before and after an existing node."""
        c = NodeContainer()
        c.set('a', _node('a'))
        c.set('c', _node('c'))
        c.set('b', _node('b'), _position='>a')
        c.set('z', _node('z'), _position='<a')
        assert c.keys() == ['z', 'a', 'b', 'c']

    def test_attribute_lookup(self):
        """'?attr=value' finds the first node with a matching attribute."""
        c = NodeContainer()
        c.set('x', _node('x', name='first'))
        c.set('y', _node('y', name='second'))
        assert c['?name=second'].label == 'y'
        assert c.index('?name=none') == -1

    def test_replace_keeps_position(self):
        """Setting an existing label replaces the node in place."""
        c = NodeContainer()
        c.set('a', _node('a'))
        c.set('b', _node('b'))
        replacement = _node('a', v='2')
        c.set('a', replacement)
        assert c.keys() == ['a', 'b']
        assert c['a'] is replacement


class TestXmlTree:
    """Building and navigating element trees."""

    def test_child_labels_are_numbered_per_tag(self):
        """Siblings with the same tag get distinct labels."""
        tree = XmlTree()
        tree.child('xsd:element', name='a')
        tree.child('xsd:element', name='b')
        tree.child('xsd:sequence')
        assert tree.keys() == ['xsd:element_0', 'xsd:element_1', 'xsd:sequence_0']

    def test_none_attributes_are_dropped(self):
        """Attributes passed as None are not stored."""
        tree = XmlTree()
        node = tree.child('xsd:element', name='a', minOccurs=None)
        assert node.attr == {'name': 'a'}

    def test_attributes_dict_comes_first(self):
        """The attributes dict keeps its order ahead of keyword attributes."""
        tree = XmlTree()
        node = tree.child('wsdl:definitions', attributes={'xmlns:wsdl': 'urn:w', 'name': 'X'}, extra='1')
        assert list(node.attr) == ['xmlns:wsdl', 'name', 'extra']

    def test_nested_children_and_get_node(self):
        """Node.child creates a branch reachable by dotted path."""
        tree = XmlTree()
        root = tree.child('root')
        root.child('item', name='one')
        root.child('item', name='two')
        assert root.is_branch
        assert tree.get_node('root_0.item_1').attr['name'] == 'two'
        assert tree.get_node('root_0.?name=one').label == 'item_0'
        assert tree.get_node('root_0.missing_0') is None

    def test_node_position_first(self):
        """node_position='<' puts the element before existing siblings."""
        tree = XmlTree()
        root = tree.child('root')
        root.child('b')
        root.child('a', node_position='<')
        assert [n.tag for n in root.children] == ['a', 'b']

    def test_find_all_walks_in_document_order(self):
        """find_all returns matching elements at any depth."""
        tree = XmlTree()
        root = tree.child('root')
        root.child('x', name='1').child('x', name='2')
        root.child('x', name='3')
        assert [n.attr['name'] for n in tree.find_all('x')] == ['1', '2', '3']

    def test_digest(self):
        """digest collects tags and attribute values of direct children."""
        tree = XmlTree()
        tree.child('a', name='n1')
        tree.child('b', name='n2')
        assert tree.digest('#t') == ['a', 'b']
        assert tree.digest('#t,#a.name') == [('a', 'n1'), ('b', 'n2')]

    def test_text_of_leaf_and_branch(self):
        """text is the value of leaves and None for branches."""
        tree = XmlTree()
        leaf = tree.child('leaf', 'hello')
        branch = tree.child('branch')
        branch.child('x')
        assert leaf.text == 'hello'
        assert branch.text is None


class TestXmlSerializer:
    """Rendering trees as XML text."""

    def test_compact_output(self):
        """Empty elements self-close and text is escaped."""
        tree = XmlTree()
        root = tree.child('root', version='1')
        root.child('empty')
        root.child('text', 'a < b & c')
        xml = XmlSerializer.serialize(tree)
        assert xml == '<root version="1"><empty/><text>a &lt; b &amp; c</text></root>'

    def test_attribute_quoting(self):
        """Attribute values are quoted and escaped."""
        tree = XmlTree()
        tree.child('root', title='say "hi" & <bye>')
        xml = XmlSerializer.serialize(tree)
        assert '&amp;' in xml
        assert '&lt;bye&gt;' in xml

    def test_doc_header(self):
        """doc_header=True adds a declaration with the encoding; a string is used as is."""
        tree = XmlTree()
        tree.child('root')
        assert XmlSerializer.serialize(tree, doc_header=True).startswith(
            '<?xml version="1.0" encoding="UTF-8"?>\n<root/>'
        )
        assert XmlSerializer.serialize(tree, doc_header='<?custom?>') == '<?custom?>\n<root/>'

    def test_pretty_output_indents(self):
        """pretty=True indents nested elements by two spaces."""
        tree = XmlTree()
        root = tree.child('root')
        root.child('child', 'value')
        xml = XmlSerializer.serialize(tree, pretty=True)
        assert '\n  <child>value</child>' in xml
        assert not xml.startswith('<?xml')

    def test_write_to_file(self, tmp_path):
        """With filename the XML is written and None is returned."""
        tree = XmlTree()
        tree.child('root', 'ü')
        target = tmp_path / 'out.xml'
        assert tree.to_xml(filename=str(target)) is None
        assert target.read_text(encoding='UTF-8') == '<root>ü</root>'
