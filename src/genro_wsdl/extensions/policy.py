# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-Policy: policies, operators, assertions and references.

A Policy is a tree: ``wsp:All`` / ``wsp:ExactlyOne`` operators nest
further operators, assertions and whole policies. Assertions are opaque
(namespace, local name, attributes) triples; the WS-* vocabulary modules
produce them as record dicts which ``assertion_from()`` converts.

Example:
    >>> wsdl.binding('StockBinding', 'StockPortType') \\
    ...     .policy('SecurePolicy') \\
    ...         .exactly_one() \\
    ...             .all() \\
    ...                 .assertion_from(SecurityPolicy.username_token()) \\
    ...             .end() \\
    ...         .end() \\
    ...     .end()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..namespaces import WSP_NS

ALL = 'all'
EXACTLY_ONE = 'exactlyOne'

RECORD_KEYS = ('type', 'namespace')


def policy_record(type_: str, namespace: str, **options: Any) -> dict[str, Any]:
    """Build an extension record. Options set to None are left out."""
    record: dict[str, Any] = {'type': type_, 'namespace': namespace}
    record.update((key, value) for key, value in options.items() if value is not None)
    return record


class ConfigBuilder(ABC):
    """Base for configuration builders.

    ``end()`` returns the parent given at construction, or the
    configuration dict when the builder was created standalone.
    """

    _parent: Any = None

    @abstractmethod
    def get_config(self) -> dict[str, Any]:
        """The builder's settings as a plain dict."""

    def end(self) -> Any:
        return self._parent if self._parent is not None else self.get_config()


@dataclass(frozen=True)
class PolicyAssertion:
    """A single assertion element.

    Attributes:
        namespace: Namespace URI of the assertion element.
        local_name: Element name, bare ('UsernameToken') or prefixed ('sp:UsernameToken').
        attributes: Attributes rendered on the element, in order.
    """

    namespace: str
    local_name: str
    attributes: Mapping[str, str] | None = None

    @property
    def prefix(self) -> str | None:
        if ':' in self.local_name:
            return self.local_name.split(':', 1)[0]
        return None


@dataclass(frozen=True)
class PolicyReference:
    """``<wsp:PolicyReference URI Digest? DigestAlgorithm?>``."""

    uri: str
    digest: str | None = None
    digest_algorithm: str | None = None


def record_attributes(record: Mapping[str, Any]) -> dict[str, str] | None:
    """Turn the options of an extension record into assertion attributes.

    Booleans render as 'true'/'false' and lists of scalars are joined with
    spaces. None values, nested mappings and lists holding mappings are
    not rendered.
    """
    attributes: dict[str, str] = {}
    for key, value in record.items():
        if key in RECORD_KEYS or value is None or isinstance(value, Mapping):
            continue
        if isinstance(value, bool):
            attributes[key] = 'true' if value else 'false'
        elif isinstance(value, (list, tuple)):
            if any(isinstance(item, Mapping) for item in value):
                continue
            attributes[key] = ' '.join(str(item) for item in value)
        else:
            attributes[key] = str(value)
    return attributes or None


def assertion_from_record(record: Mapping[str, Any]) -> PolicyAssertion:
    """Build a PolicyAssertion from a record with 'type' and 'namespace' keys."""
    return PolicyAssertion(record['namespace'], record['type'], record_attributes(record))


class _AssertionHost:
    """Assertion helpers shared by Policy and PolicyOperator."""

    _assertions: list[PolicyAssertion]

    def assertion(self, namespace: str, local_name: str, attributes: Mapping[str, str] | None = None):
        """Append an assertion. Returns self."""
        self._assertions.append(
            PolicyAssertion(namespace, local_name, dict(attributes) if attributes is not None else None)
        )
        return self

    def assertion_from(self, record: Mapping[str, Any]):
        """Append an assertion built from an extension record. Returns self."""
        self._assertions.append(assertion_from_record(record))
        return self

    def get_assertions(self) -> tuple[PolicyAssertion, ...]:
        return tuple(self._assertions)


class Policy(_AssertionHost):
    """``<wsp:Policy xml:id? Name?>``."""

    namespace = WSP_NS

    def __init__(self, id: str | None = None, name: str | None = None, parent: Any = None) -> None:
        self._id = id
        self._name = name
        self._parent = parent
        self._operators: list[PolicyOperator] = []
        self._assertions: list[PolicyAssertion] = []
        self._references: list[PolicyReference] = []

    def all(self) -> PolicyOperator:
        operator = PolicyOperator(self, ALL)
        self._operators.append(operator)
        return operator

    def exactly_one(self) -> PolicyOperator:
        operator = PolicyOperator(self, EXACTLY_ONE)
        self._operators.append(operator)
        return operator

    def reference(self, uri: str) -> Policy:
        self._references.append(PolicyReference(uri))
        return self

    def end(self) -> Any:
        return self._parent

    def get_id(self) -> str | None:
        return self._id

    def get_name(self) -> str | None:
        return self._name

    def get_operators(self) -> tuple[PolicyOperator, ...]:
        return tuple(self._operators)

    def get_references(self) -> tuple[PolicyReference, ...]:
        return tuple(self._references)

    def has_assertion_in(self, namespace: str) -> bool:
        """True if any assertion, at any depth, is in ``namespace``."""
        if any(a.namespace == namespace for a in self._assertions):
            return True
        return any(op.has_assertion_in(namespace) for op in self._operators)

    def iter_assertions(self):
        """Yield every assertion at any depth, in document order."""
        for operator in self._operators:
            yield from operator.iter_assertions()
        yield from self._assertions


class PolicyOperator(_AssertionHost):
    """``<wsp:All>`` or ``<wsp:ExactlyOne>``."""

    def __init__(self, parent: Policy | PolicyOperator, type: str) -> None:
        self._parent = parent
        self._type = type
        self._nested_operators: list[PolicyOperator] = []
        self._assertions: list[PolicyAssertion] = []
        self._nested_policies: list[Policy] = []

    def all(self) -> PolicyOperator:
        operator = PolicyOperator(self, ALL)
        self._nested_operators.append(operator)
        return operator

    def exactly_one(self) -> PolicyOperator:
        operator = PolicyOperator(self, EXACTLY_ONE)
        self._nested_operators.append(operator)
        return operator

    def policy(self, id: str | None = None, name: str | None = None) -> Policy:
        policy = Policy(id, name, self)
        self._nested_policies.append(policy)
        return policy

    def end(self) -> Policy | PolicyOperator:
        return self._parent

    def get_type(self) -> str:
        return self._type

    def get_nested_operators(self) -> tuple[PolicyOperator, ...]:
        return tuple(self._nested_operators)

    def get_nested_policies(self) -> tuple[Policy, ...]:
        return tuple(self._nested_policies)

    def has_assertion_in(self, namespace: str) -> bool:
        if any(a.namespace == namespace for a in self._assertions):
            return True
        if any(op.has_assertion_in(namespace) for op in self._nested_operators):
            return True
        return any(p.has_assertion_in(namespace) for p in self._nested_policies)

    def iter_assertions(self):
        for operator in self._nested_operators:
            yield from operator.iter_assertions()
        yield from self._assertions
        for policy in self._nested_policies:
            yield from policy.iter_assertions()


class PolicyAttachment:
    """Mixin for constructs that carry inline policies and policy references."""

    def __init__(self) -> None:
        self._policies: list[Policy] = []
        self._policy_references: list[PolicyReference] = []

    def policy(self, id: str | None = None, name: str | None = None) -> Policy:
        """Attach an inline policy and return it; its ``end()`` returns this construct."""
        policy = Policy(id, name, self)
        self._policies.append(policy)
        return policy

    def add_policy(self, policy: Policy) -> None:
        self._policies.append(policy)

    def policy_reference(
        self, uri: str, digest: str | None = None, digest_algorithm: str | None = None
    ):
        """Attach a policy reference. Returns self."""
        self._policy_references.append(PolicyReference(uri, digest, digest_algorithm))
        return self

    def get_policies(self) -> tuple[Policy, ...]:
        return tuple(self._policies)

    def get_policy_references(self) -> tuple[PolicyReference, ...]:
        return tuple(self._policy_references)

    def has_policy_attachments(self) -> bool:
        return bool(self._policies or self._policy_references)
