# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-AtomicTransaction, WS-BusinessActivity and WS-Coordination."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..namespaces import WSAT_NS, WSBA_NS, WSCOOR_NS
from ..validations import EnumValue
from .policy import ConfigBuilder, policy_record


class TransactionFlowType(str, Enum):
    MANDATORY = 'Mandatory'
    SUPPORTED = 'Supported'
    ALLOWED = 'Allowed'
    NOT_ALLOWED = 'NotAllowed'


as_flow_type = EnumValue(TransactionFlowType)


class _CoordinationProtocol(ConfigBuilder):
    """A coordination protocol with a version, defaulting to 1.0."""

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._version = '1.0'

    def version(self, version: str):
        self._version = version
        return self

    def get_version(self) -> str:
        return self._version

    def get_config(self) -> dict[str, str]:
        return {'version': self._version}


class AtomicTransaction(_CoordinationProtocol):
    pass


class BusinessActivity(_CoordinationProtocol):
    pass


class TransactionFlow(ConfigBuilder):
    """Transaction flow requirement of an operation. Defaults to Supported."""

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._flow_type = TransactionFlowType.SUPPORTED
        self._at_assertion = False
        self._at_always_capability = False

    def flow_type(self, flow_type: TransactionFlowType | str) -> TransactionFlow:
        self._flow_type = as_flow_type(flow_type)
        return self

    def mandatory(self) -> TransactionFlow:
        self._flow_type = TransactionFlowType.MANDATORY
        return self

    def supported(self) -> TransactionFlow:
        self._flow_type = TransactionFlowType.SUPPORTED
        return self

    def allowed(self) -> TransactionFlow:
        self._flow_type = TransactionFlowType.ALLOWED
        return self

    def not_allowed(self) -> TransactionFlow:
        self._flow_type = TransactionFlowType.NOT_ALLOWED
        return self

    def at_assertion(self, enabled: bool = True) -> TransactionFlow:
        self._at_assertion = enabled
        return self

    def at_always_capability(self, enabled: bool = True) -> TransactionFlow:
        self._at_always_capability = enabled
        return self

    def get_flow_type(self) -> TransactionFlowType:
        return self._flow_type

    def is_at_assertion(self) -> bool:
        return self._at_assertion

    def is_at_always_capability(self) -> bool:
        return self._at_always_capability

    def get_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {'flowType': self._flow_type.value}
        if self._at_assertion:
            config['atAssertion'] = True
        if self._at_always_capability:
            config['atAlwaysCapability'] = True
        return config


class TransactionPolicy:
    NAMESPACE_WSAT = WSAT_NS
    NAMESPACE_WSBA = WSBA_NS
    NAMESPACE_WSCOOR = WSCOOR_NS

    @staticmethod
    def atomic_transaction(parent: Any = None) -> AtomicTransaction:
        return AtomicTransaction(parent)

    @staticmethod
    def business_activity(parent: Any = None) -> BusinessActivity:
        return BusinessActivity(parent)

    @staticmethod
    def transaction_flow(parent: Any = None) -> TransactionFlow:
        return TransactionFlow(parent)

    @staticmethod
    def at(version: str = '1.0') -> dict[str, Any]:
        return policy_record('wsat:ATAssertion', WSAT_NS, version=version)

    @staticmethod
    def ba(version: str = '1.0') -> dict[str, Any]:
        return policy_record('wsba:BAAssertion', WSBA_NS, version=version)

    @staticmethod
    def coordination_context() -> dict[str, Any]:
        return policy_record('wscoor:CoordinationContext', WSCOOR_NS)

    @staticmethod
    def at_always_capability() -> dict[str, Any]:
        return policy_record('wsat:ATAlwaysCapability', WSAT_NS)

    @staticmethod
    def ba_atomic_outcome() -> dict[str, Any]:
        return policy_record('wsba:BAAtomicOutcome', WSBA_NS)

    @staticmethod
    def ba_mixed_outcome() -> dict[str, Any]:
        return policy_record('wsba:BAMixedOutcome', WSBA_NS)
