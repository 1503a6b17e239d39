# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Element declarations."""

from __future__ import annotations

from dataclasses import dataclass

from ..enums import DerivationControl, XsdType

UNBOUNDED = -1


@dataclass(frozen=True)
class Element:
    """An ``<element>`` declaration inside a sequence, choice or all.

    Attributes:
        name: Element name, unique within its owning collection.
        type: XsdType or a qualified type name such as 'tns:Address'.
        nullable: Render ``nillable="true"``.
        min_occurs: Lower bound, omitted when None.
        max_occurs: Upper bound, omitted when None. -1 means unbounded.
        substitution_group: Head element this element can substitute.
        block: Blocked derivations.
    """

    name: str
    type: XsdType | str
    nullable: bool = False
    min_occurs: int | None = None
    max_occurs: int | None = None
    substitution_group: str | None = None
    block: DerivationControl | str | None = None

    @property
    def is_unbounded(self) -> bool:
        return self.max_occurs == UNBOUNDED


def occurs_text(value: int | None) -> str | None:
    """Render a cardinality bound, mapping -1 to 'unbounded'."""
    if value is None:
        return None
    if value == UNBOUNDED:
        return 'unbounded'
    return str(value)
