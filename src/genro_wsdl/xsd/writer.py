# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""SchemaWriter - emit XSD declarations into an XmlTree.

Both document generators embed an inline ``<schema>`` in their
``<types>`` section. The schema vocabulary is the same, only the prefix
bound to the XML Schema namespace differs: ``xsd`` in WSDL 1.1
documents, ``xs`` in WSDL 2.0 documents. SchemaWriter holds that prefix
and renders every XSD construct with it.

Type references:
    - XsdType members are qualified with the writer's prefix.
    - Plain strings for element, attribute and part types are used as given.
    - Base-like references (restriction/extension base, list itemType,
      union memberTypes) that carry no prefix are qualified with ``tns:``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..enums import XsdType, enum_text
from .compositors import All, Any, Choice
from .element import occurs_text

if TYPE_CHECKING:
    from ..documentation import Documentation
    from ..imports import SchemaImport, SchemaInclude, SchemaRedefine
    from ..xml_node import XmlNode
    from .annotations import Annotation
    from .attributes import AnyAttribute, Attribute, AttributeGroup
    from .complex_type import ComplexType
    from .constraints import IdentityConstraint
    from .derived_types import ListType, UnionType
    from .element import Element
    from .groups import ElementGroup
    from .simple_content import SimpleContent
    from .simple_type import SimpleType


class SchemaWriter:
    """Render XSD builders as XmlNodes.

    Args:
        prefix: Prefix bound to the XML Schema namespace in the host document.
    """

    def __init__(self, prefix: str = 'xsd') -> None:
        self.prefix = prefix

    # -------------------------------------------------------------------------
    # Names
    # -------------------------------------------------------------------------

    def q(self, local_name: str) -> str:
        """Qualify a schema element name."""
        return f'{self.prefix}:{local_name}'

    def type_ref(self, type: XsdType | str) -> str:
        """Render an element, attribute or part type."""
        if isinstance(type, XsdType):
            return type.prefixed(self.prefix)
        return type

    def base_ref(self, type: XsdType | str) -> str:
        """Render a base-like reference, qualifying bare names with ``tns:``."""
        if isinstance(type, XsdType):
            return type.prefixed(self.prefix)
        if ':' in type:
            return type
        return f'tns:{type}'

    # -------------------------------------------------------------------------
    # Schema
    # -------------------------------------------------------------------------

    def write_schema(
        self,
        parent: XmlNode,
        target_namespace: str,
        imports: Iterable[SchemaImport] = (),
        includes: Iterable[SchemaInclude] = (),
        redefines: Iterable[SchemaRedefine] = (),
        element_groups: Iterable[ElementGroup] = (),
        attribute_groups: Iterable[AttributeGroup] = (),
        simple_types: Iterable[SimpleType] = (),
        list_types: Iterable[ListType] = (),
        union_types: Iterable[UnionType] = (),
        complex_types: Iterable[ComplexType] = (),
    ) -> XmlNode:
        """Append a ``<schema>`` element under ``parent`` and fill it.

        Content order: imports, includes, redefines, element groups,
        attribute groups, simple types, list types, union types, complex types.
        """
        schema = parent.child(self.q('schema'), targetNamespace=target_namespace)
        for schema_import in imports:
            schema.child(
                self.q('import'),
                namespace=schema_import.namespace,
                schemaLocation=schema_import.schema_location,
            )
        for include in includes:
            schema.child(self.q('include'), schemaLocation=include.schema_location)
        for redefine in redefines:
            self.write_redefine(schema, redefine)
        for group in element_groups:
            self.write_element_group(schema, group)
        for group in attribute_groups:
            self.write_attribute_group(schema, group)
        for simple_type in simple_types:
            self.write_simple_type(schema, simple_type)
        for list_type in list_types:
            self.write_list_type(schema, list_type)
        for union_type in union_types:
            self.write_union_type(schema, union_type)
        for complex_type in complex_types:
            self.write_complex_type(schema, complex_type)
        return schema

    def write_redefine(self, parent: XmlNode, redefine: SchemaRedefine) -> XmlNode:
        node = parent.child(self.q('redefine'), schemaLocation=redefine.get_schema_location())
        for simple_type in redefine.get_simple_types().values():
            self.write_simple_type(node, simple_type)
        for complex_type in redefine.get_complex_types().values():
            self.write_complex_type(node, complex_type)
        for group in redefine.get_attribute_groups().values():
            self.write_attribute_group(node, group)
        for group in redefine.get_groups().values():
            self.write_element_group(node, group)
        return node

    # -------------------------------------------------------------------------
    # Groups
    # -------------------------------------------------------------------------

    def write_element_group(self, parent: XmlNode, group: ElementGroup) -> XmlNode:
        """``<group name>`` holding its choice, its all, or a sequence of its elements."""
        node = parent.child(self.q('group'), name=group.get_name())
        choice = group.get_choice()
        all_ = group.get_all()
        if choice is not None:
            self.write_choice(node, choice)
        elif all_ is not None:
            self.write_all(node, all_)
        elif group.get_elements():
            sequence = node.child(self.q('sequence'))
            for element in group.get_elements():
                self.write_element(sequence, element)
        return node

    def write_attribute_group(self, parent: XmlNode, group: AttributeGroup) -> XmlNode:
        node = parent.child(self.q('attributeGroup'), name=group.get_name())
        for attribute in group.get_attributes():
            self.write_attribute(node, attribute)
        any_attribute = group.get_any_attribute()
        if any_attribute is not None:
            self.write_any_attribute(node, any_attribute)
        return node

    # -------------------------------------------------------------------------
    # Simple types
    # -------------------------------------------------------------------------

    def write_simple_type(self, parent: XmlNode, simple_type: SimpleType) -> XmlNode:
        node = parent.child(
            self.q('simpleType'),
            name=simple_type.get_name(),
            final=enum_text(simple_type.get_final()),
        )
        self.write_documentation(node, simple_type.get_documentation())
        restriction = node.child(self.q('restriction'), base=self.base_ref(simple_type.get_base()))
        self._write_length_facets(restriction, simple_type)
        for facet, value in (
            ('minInclusive', simple_type.get_min_inclusive()),
            ('maxInclusive', simple_type.get_max_inclusive()),
            ('minExclusive', simple_type.get_min_exclusive()),
            ('maxExclusive', simple_type.get_max_exclusive()),
        ):
            if value is not None:
                restriction.child(self.q(facet), attributes={'value': value})
        return node

    def write_list_type(self, parent: XmlNode, list_type: ListType) -> XmlNode:
        """``<simpleType><list>``, nested in a restriction when facets are set."""
        node = parent.child(self.q('simpleType'), name=list_type.get_name())
        item_type = self.base_ref(list_type.get_item_type())
        if not list_type.has_restrictions():
            node.child(self.q('list'), itemType=item_type)
            return node
        restriction = node.child(self.q('restriction'))
        restriction.child(self.q('simpleType')).child(self.q('list'), itemType=item_type)
        self._write_length_facets(restriction, list_type)
        return node

    def write_union_type(self, parent: XmlNode, union_type: UnionType) -> XmlNode:
        node = parent.child(self.q('simpleType'), name=union_type.get_name())
        members = ' '.join(self.base_ref(t) for t in union_type.get_member_types())
        node.child(self.q('union'), memberTypes=members)
        return node

    def _write_length_facets(self, restriction: XmlNode, source: SimpleType | ListType) -> None:
        if source.get_min_length() is not None:
            restriction.child(self.q('minLength'), attributes={'value': str(source.get_min_length())})
        if source.get_max_length() is not None:
            restriction.child(self.q('maxLength'), attributes={'value': str(source.get_max_length())})
        if source.get_pattern() is not None:
            restriction.child(self.q('pattern'), attributes={'value': source.get_pattern()})
        for value in source.get_enumeration():
            restriction.child(self.q('enumeration'), attributes={'value': value})

    # -------------------------------------------------------------------------
    # Complex types
    # -------------------------------------------------------------------------

    def write_complex_type(self, parent: XmlNode, complex_type: ComplexType) -> XmlNode:
        """Render a complex type.

        A simple-content type renders only its ``<simpleContent>``. Otherwise
        the content model goes under the type, or under
        ``<complexContent><extension>`` when the type extends another one.
        """
        node = parent.child(
            self.q('complexType'),
            name=complex_type.get_name(),
            abstract='true' if complex_type.is_abstract() else None,
            mixed='true' if complex_type.is_mixed() else None,
            block=enum_text(complex_type.get_block()),
            final=enum_text(complex_type.get_final()),
        )
        self.write_annotation(node, complex_type.get_annotation())
        self.write_documentation(node, complex_type.get_documentation())

        simple_content = complex_type.get_simple_content()
        if simple_content is not None:
            self.write_simple_content(node, simple_content)
            return node

        content = node
        if complex_type.get_extends() is not None:
            content = node.child(self.q('complexContent')).child(
                self.q('extension'), base=f'tns:{complex_type.get_extends()}'
            )

        if complex_type.get_elements() or complex_type.get_group_refs():
            sequence = content.child(self.q('sequence'))
            for element in complex_type.get_elements():
                self.write_element(sequence, element)
            for ref in complex_type.get_group_refs():
                sequence.child(self.q('group'), ref=f'tns:{ref}')

        for compositor in complex_type.get_compositors():
            if isinstance(compositor, Choice):
                self.write_choice(content, compositor)
            elif isinstance(compositor, All):
                self.write_all(content, compositor)
            elif isinstance(compositor, Any):
                self.write_any(content, compositor)

        for attribute in complex_type.get_attributes():
            self.write_attribute(content, attribute)
        for ref in complex_type.get_attribute_group_refs():
            content.child(self.q('attributeGroup'), ref=f'tns:{ref}')
        any_attribute = complex_type.get_any_attribute()
        if any_attribute is not None:
            self.write_any_attribute(content, any_attribute)

        for constraint in (
            *complex_type.get_keys(),
            *complex_type.get_key_refs(),
            *complex_type.get_uniques(),
        ):
            self.write_identity_constraint(node, constraint)
        return node

    def write_simple_content(self, parent: XmlNode, simple_content: SimpleContent) -> XmlNode:
        """``<simpleContent>``; empty when no derivation was chosen."""
        node = parent.child(self.q('simpleContent'))
        kind = simple_content.get_derivation_type()
        base = simple_content.get_base()
        if kind is not None and base is not None:
            derivation = node.child(self.q(kind), base=self.base_ref(base))
            for attribute in simple_content.get_attributes():
                self.write_attribute(derivation, attribute)
        return node

    def write_identity_constraint(self, parent: XmlNode, constraint: IdentityConstraint) -> XmlNode:
        node = parent.child(
            self.q(constraint.tag),
            name=constraint.get_name(),
            refer=getattr(constraint, 'get_refer', lambda: None)(),
        )
        selector = constraint.get_selector()
        if selector is not None:
            node.child(self.q('selector'), xpath=selector.get_xpath())
        for field in constraint.get_fields():
            node.child(self.q('field'), xpath=field.get_xpath())
        return node

    # -------------------------------------------------------------------------
    # Particles
    # -------------------------------------------------------------------------

    def write_element(self, parent: XmlNode, element: Element) -> XmlNode:
        return parent.child(
            self.q('element'),
            name=element.name,
            type=self.type_ref(element.type),
            nillable='true' if element.nullable else None,
            minOccurs=occurs_text(element.min_occurs),
            maxOccurs=occurs_text(element.max_occurs),
            substitutionGroup=element.substitution_group,
            block=enum_text(element.block),
        )

    def write_choice(self, parent: XmlNode, choice: Choice) -> XmlNode:
        node = parent.child(
            self.q('choice'),
            minOccurs=occurs_text(choice.get_min_occurs()),
            maxOccurs=occurs_text(choice.get_max_occurs()),
        )
        for element in choice.get_elements():
            self.write_element(node, element)
        return node

    def write_all(self, parent: XmlNode, all_: All) -> XmlNode:
        node = parent.child(self.q('all'))
        for element in all_.get_elements():
            self.write_element(node, element)
        return node

    def write_any(self, parent: XmlNode, any_: Any) -> XmlNode:
        return parent.child(
            self.q('any'),
            namespace=any_.get_namespace(),
            processContents=any_.get_process_contents(),
            minOccurs=occurs_text(any_.get_min_occurs()),
            maxOccurs=occurs_text(any_.get_max_occurs()),
        )

    def write_attribute(self, parent: XmlNode, attribute: Attribute) -> XmlNode:
        return parent.child(
            self.q('attribute'),
            name=attribute.get_name(),
            type=self.type_ref(attribute.get_type()),
            use=attribute.get_use(),
            default=attribute.get_default(),
            fixed=attribute.get_fixed(),
            form=attribute.get_form(),
        )

    def write_any_attribute(self, parent: XmlNode, any_attribute: AnyAttribute) -> XmlNode:
        return parent.child(
            self.q('anyAttribute'),
            namespace=any_attribute.get_namespace(),
            processContents=any_attribute.get_process_contents(),
        )

    # -------------------------------------------------------------------------
    # Annotations
    # -------------------------------------------------------------------------

    def write_documentation(self, parent: XmlNode, documentation: Documentation | None) -> XmlNode | None:
        """Insert ``<annotation><documentation>`` as the first child of ``parent``."""
        if documentation is None:
            return None
        node = parent.child(self.q('annotation'), node_position='<')
        self._write_documentation_entry(node, documentation)
        return node

    def write_annotation(self, parent: XmlNode, annotation: Annotation | None) -> XmlNode | None:
        """Insert an explicit annotation block as the first child of ``parent``."""
        if annotation is None:
            return None
        node = parent.child(self.q('annotation'), node_position='<')
        for documentation in annotation.get_documentations():
            self._write_documentation_entry(node, documentation)
        for app_info in annotation.get_app_infos():
            node.child(self.q('appinfo'), app_info.content, source=app_info.source)
        return node

    def _write_documentation_entry(self, parent: XmlNode, documentation: Documentation) -> None:
        parent.child(
            self.q('documentation'),
            documentation.content,
            attributes={'xml:lang': documentation.lang},
            source=documentation.source,
        )
