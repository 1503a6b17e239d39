# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-Eventing: event sources, subscriptions and delivery."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from ..namespaces import WSE_NS
from .addressing import EndpointReference
from .policy import policy_record


class DeliveryMode(str, Enum):
    PUSH = f'{WSE_NS}/DeliveryModes/Push'
    PULL = f'{WSE_NS}/DeliveryModes/Pull'
    WRAPPED = f'{WSE_NS}/DeliveryModes/Wrapped'


@dataclass(frozen=True)
class Delivery:
    notify_to: EndpointReference
    mode: DeliveryMode = DeliveryMode.PUSH


@dataclass(frozen=True)
class Filter:
    dialect: str
    content: str


@dataclass(frozen=True)
class Subscription:
    """A granted subscription: its manager endpoint and expiry."""

    subscription_manager: EndpointReference
    expires: str


class Subscribe:
    """A ``wse:Subscribe`` request.

    ``expires`` is an xs:duration / xs:dateTime string or a datetime.
    """

    def __init__(self, delivery: Delivery, expires: str | datetime | None = None) -> None:
        self._delivery = delivery
        self._expires = expires
        self._end_to: EndpointReference | None = None
        self._filter: Filter | None = None

    def end_to(self, end_to: EndpointReference) -> Subscribe:
        self._end_to = end_to
        return self

    def filter(self, filter: Filter) -> Subscribe:
        self._filter = filter
        return self

    def get_delivery(self) -> Delivery:
        return self._delivery

    def get_expires(self) -> str | datetime | None:
        return self._expires

    def get_end_to(self) -> EndpointReference | None:
        return self._end_to

    def get_filter(self) -> Filter | None:
        return self._filter


class EventingPolicy:
    NAMESPACE_URI = WSE_NS

    @staticmethod
    def event_source() -> dict[str, Any]:
        return policy_record('wse:EventSource', WSE_NS)

    @staticmethod
    def subscription_policy(policies: list[Any] | None = None) -> dict[str, Any]:
        return policy_record('wse:SubscriptionPolicy', WSE_NS, policies=list(policies or []))
