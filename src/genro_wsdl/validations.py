# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Validation utilities for builder arguments.

Validators are small frozen dataclasses called with the value to check.
They raise InvalidArgumentException (a ValueError) on failure, at the
moment the offending value enters the builder.

Validator classes:
    OneOf: value must be one of a fixed set of choices
    EnumValue: coerce a string or enum member into a given Enum class
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import InvalidArgumentException


@dataclass(frozen=True)
class OneOf:
    """Membership constraint.

    Args:
        choices: Accepted values.
        message: Error message. Defaults to a generic "must be one of" text.
    """

    choices: tuple[Any, ...]
    message: str | None = None

    def __call__(self, value: Any) -> Any:
        if value not in self.choices:
            listed = ', '.join(str(c) for c in self.choices if c is not None)
            raise InvalidArgumentException(self.message or f"must be one of: {listed}")
        return value


@dataclass(frozen=True)
class EnumValue:
    """Coerce a value into a member of ``enum_cls``."""

    enum_cls: type[Enum]

    def __call__(self, value: Any) -> Enum:
        if isinstance(value, self.enum_cls):
            return value
        try:
            return self.enum_cls(value)
        except ValueError:
            valid = ', '.join(str(m.value) for m in self.enum_cls)
            raise InvalidArgumentException(
                f"'{value}' is not a valid {self.enum_cls.__name__} (expected one of: {valid})"
            ) from None


# --- Shared validators ---

process_contents = OneOf(
    ('strict', 'lax', 'skip'),
    message='processContents must be one of: strict, lax, skip',
)

all_min_occurs = OneOf(
    (None, 0, 1),
    message='Elements in <all> can only have minOccurs 0 or 1',
)

all_max_occurs = OneOf(
    (None, 1),
    message='Elements in <all> can only have maxOccurs 1',
)
