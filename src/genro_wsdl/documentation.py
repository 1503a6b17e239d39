# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Human-readable documentation attached to WSDL and XSD constructs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Documentation:
    """A documentation block: text plus optional xml:lang and source URI."""

    content: str
    lang: str | None = None
    source: str | None = None


class Documented:
    """Mixin for builders that carry a single, overwritable documentation block."""

    _documentation: Documentation | None = None

    def documentation(self, content: str, lang: str | None = None, source: str | None = None):
        """Set the documentation (replaces any previous one). Returns self."""
        self._documentation = Documentation(content, lang, source)
        return self

    def get_documentation(self) -> Documentation | None:
        return self._documentation
