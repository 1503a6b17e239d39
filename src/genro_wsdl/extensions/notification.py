# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-Notification (WS-BaseNotification and WS-Topics)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from ..namespaces import WSN_NS, WST_NS
from ..validations import EnumValue
from .addressing import EndpointReference


class TopicDialect(str, Enum):
    SIMPLE = f'{WST_NS}/TopicExpression/Simple'
    CONCRETE = f'{WST_NS}/TopicExpression/Concrete'
    FULL = f'{WST_NS}/TopicExpression/Full'
    XPATH = 'http://www.w3.org/TR/1999/REC-xpath-19991116'


as_topic_dialect = EnumValue(TopicDialect)


@dataclass(frozen=True)
class TopicExpression:
    dialect: TopicDialect
    value: str


@dataclass(frozen=True)
class NotificationConsumer:
    endpoint_reference: EndpointReference


class Topic:
    """A node of a topic tree."""

    def __init__(self, name: str, message_types: list[str] | None = None,
                 children: list[Topic] | None = None) -> None:
        self._name = name
        self._message_types = list(message_types or [])
        self._children = list(children or [])

    def add_message_type(self, message_type: str) -> Topic:
        self._message_types.append(message_type)
        return self

    def add_child(self, child: Topic) -> Topic:
        self._children.append(child)
        return self

    def get_name(self) -> str:
        return self._name

    def get_message_types(self) -> tuple[str, ...]:
        return tuple(self._message_types)

    def get_children(self) -> tuple[Topic, ...]:
        return tuple(self._children)


class NotificationProducer:
    def __init__(self) -> None:
        self._topic_expression: TopicExpression | None = None
        self._fixed_topic_set = False
        self._dialects: list[TopicDialect] = []

    def topic_expression(self, dialect: TopicDialect | str, value: str) -> NotificationProducer:
        self._topic_expression = TopicExpression(as_topic_dialect(dialect), value)
        return self

    def fixed_topic_set(self, fixed: bool = True) -> NotificationProducer:
        self._fixed_topic_set = fixed
        return self

    def add_topic_expression_dialect(self, dialect: TopicDialect | str) -> NotificationProducer:
        self._dialects.append(as_topic_dialect(dialect))
        return self

    def get_topic_expression(self) -> TopicExpression | None:
        return self._topic_expression

    def is_fixed_topic_set(self) -> bool:
        return self._fixed_topic_set

    def get_topic_expression_dialects(self) -> tuple[TopicDialect, ...]:
        return tuple(self._dialects)


class NotificationSubscribe:
    """A ``wsn:Subscribe`` request for a consumer endpoint."""

    def __init__(self, consumer_reference: EndpointReference) -> None:
        self._consumer_reference = consumer_reference
        self._filter: TopicExpression | None = None
        self._initial_termination_time: datetime | None = None
        self._subscription_policy: dict[str, Any] = {}

    def filter(self, filter: TopicExpression) -> NotificationSubscribe:
        self._filter = filter
        return self

    def initial_termination_time(self, time: datetime) -> NotificationSubscribe:
        self._initial_termination_time = time
        return self

    def add_policy_element(self, key: str, value: Any) -> NotificationSubscribe:
        self._subscription_policy[key] = value
        return self

    def get_consumer_reference(self) -> EndpointReference:
        return self._consumer_reference

    def get_filter(self) -> TopicExpression | None:
        return self._filter

    def get_initial_termination_time(self) -> datetime | None:
        return self._initial_termination_time

    def get_subscription_policy(self) -> dict[str, Any]:
        return dict(self._subscription_policy)


class NotificationPolicy:
    NAMESPACE_WSN = WSN_NS
    NAMESPACE_WST = WST_NS

    @staticmethod
    def notification_producer() -> NotificationProducer:
        return NotificationProducer()

    @staticmethod
    def notification_consumer(endpoint: EndpointReference) -> NotificationConsumer:
        return NotificationConsumer(endpoint)

    @staticmethod
    def topic(name: str, message_types: list[str] | None = None,
              children: list[Topic] | None = None) -> Topic:
        return Topic(name, message_types, children)
