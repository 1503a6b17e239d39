# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-ResourceFramework: resources, properties and lifetime.

Every builder takes an optional parent. ``end()`` returns that parent, or
the builder's configuration dict when it was created standalone.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ..namespaces import WSRF_R_NS, WSRF_RL_NS, WSRF_RP_NS
from .addressing import EndpointReference
from .policy import ConfigBuilder


class ResourceProperty(ConfigBuilder):
    def __init__(self, name: str, type: str, parent: Any = None) -> None:
        self._name = name
        self._type = type
        self._parent = parent
        self._modifiable = False
        self._subscribable = False

    def modifiable(self, modifiable: bool = True) -> ResourceProperty:
        self._modifiable = modifiable
        return self

    def subscribable(self, subscribable: bool = True) -> ResourceProperty:
        self._subscribable = subscribable
        return self

    def get_name(self) -> str:
        return self._name

    def get_type(self) -> str:
        return self._type

    def is_modifiable(self) -> bool:
        return self._modifiable

    def is_subscribable(self) -> bool:
        return self._subscribable

    def get_config(self) -> dict[str, Any]:
        return {
            'name': self._name,
            'type': self._type,
            'modifiable': self._modifiable,
            'subscribable': self._subscribable,
        }


class ResourceProperties(ConfigBuilder):
    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._properties: list[ResourceProperty] = []
        self._dialects: list[str] = []

    def add_property(self, name: str, type: str) -> ResourceProperty:
        """Append a property and return it; its ``end()`` comes back here."""
        prop = ResourceProperty(name, type, self)
        self._properties.append(prop)
        return prop

    def add_query_expression_dialect(self, dialect: str) -> ResourceProperties:
        self._dialects.append(dialect)
        return self

    def get_properties(self) -> tuple[ResourceProperty, ...]:
        return tuple(self._properties)

    def get_query_expression_dialects(self) -> tuple[str, ...]:
        return tuple(self._dialects)

    def get_config(self) -> dict[str, Any]:
        return {
            'properties': [prop.get_config() for prop in self._properties],
            'queryExpressionDialects': list(self._dialects),
        }


class ResourceLifetime(ConfigBuilder):
    """Termination settings. ``current_time`` defaults to the creation time (UTC)."""

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._termination_time: datetime | None = None
        self._current_time = datetime.now(timezone.utc)
        self._scheduled_termination = False
        self._immediate_termination = False

    def termination_time(self, termination_time: datetime | None) -> ResourceLifetime:
        self._termination_time = termination_time
        return self

    def current_time(self, current_time: datetime) -> ResourceLifetime:
        self._current_time = current_time
        return self

    def scheduled_termination(self, scheduled: bool = True) -> ResourceLifetime:
        self._scheduled_termination = scheduled
        return self

    def immediate_termination(self, immediate: bool = True) -> ResourceLifetime:
        self._immediate_termination = immediate
        return self

    def get_termination_time(self) -> datetime | None:
        return self._termination_time

    def get_current_time(self) -> datetime:
        return self._current_time

    def is_scheduled_termination(self) -> bool:
        return self._scheduled_termination

    def is_immediate_termination(self) -> bool:
        return self._immediate_termination

    def get_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {
            'currentTime': self._current_time.isoformat(),
            'scheduledTermination': self._scheduled_termination,
            'immediateTermination': self._immediate_termination,
        }
        if self._termination_time is not None:
            config['terminationTime'] = self._termination_time.isoformat()
        return config


class Resource(ConfigBuilder):
    """A WS-Resource: an endpoint with lazily created properties and lifetime."""

    def __init__(self, endpoint_reference: EndpointReference, parent: Any = None) -> None:
        self._endpoint_reference = endpoint_reference
        self._parent = parent
        self._properties: ResourceProperties | None = None
        self._lifetime: ResourceLifetime | None = None

    def resource_properties(self) -> ResourceProperties:
        if self._properties is None:
            self._properties = ResourceProperties(self)
        return self._properties

    def resource_lifetime(self) -> ResourceLifetime:
        if self._lifetime is None:
            self._lifetime = ResourceLifetime(self)
        return self._lifetime

    def get_endpoint_reference(self) -> EndpointReference:
        return self._endpoint_reference

    def get_resource_properties(self) -> ResourceProperties | None:
        return self._properties

    def get_resource_lifetime(self) -> ResourceLifetime | None:
        return self._lifetime

    def get_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {'endpointReference': self._endpoint_reference.to_dict()}
        if self._properties is not None:
            config['resourceProperties'] = self._properties.get_config()
        if self._lifetime is not None:
            config['resourceLifetime'] = self._lifetime.get_config()
        return config


class GetResourceProperty(ConfigBuilder):
    def __init__(self, resource_property: str, parent: Any = None) -> None:
        self._resource_property = resource_property
        self._parent = parent

    def get_resource_property(self) -> str:
        return self._resource_property

    def get_config(self) -> dict[str, str]:
        return {'resourceProperty': self._resource_property}


class SetResourceProperties(ConfigBuilder):
    """Insert, update and delete requests, kept in call order per kind."""

    def __init__(self, parent: Any = None) -> None:
        self._parent = parent
        self._insert: list[dict[str, Any]] = []
        self._update: list[dict[str, Any]] = []
        self._delete: list[str] = []

    def insert(self, name: str, value: Any) -> SetResourceProperties:
        self._insert.append({'name': name, 'value': value})
        return self

    def update(self, name: str, value: Any) -> SetResourceProperties:
        self._update.append({'name': name, 'value': value})
        return self

    def delete(self, name: str) -> SetResourceProperties:
        self._delete.append(name)
        return self

    def get_insert(self) -> list[dict[str, Any]]:
        return list(self._insert)

    def get_update(self) -> list[dict[str, Any]]:
        return list(self._update)

    def get_delete(self) -> list[str]:
        return list(self._delete)

    def get_config(self) -> dict[str, Any]:
        return {'insert': list(self._insert), 'update': list(self._update), 'delete': list(self._delete)}


class ResourceFrameworkPolicy:
    NAMESPACE_WSRF_R = WSRF_R_NS
    NAMESPACE_WSRF_RP = WSRF_RP_NS
    NAMESPACE_WSRF_RL = WSRF_RL_NS

    @staticmethod
    def resource(address: str, parent: Any = None) -> Resource:
        return Resource(EndpointReference(address), parent)

    @staticmethod
    def resource_properties(parent: Any = None) -> ResourceProperties:
        return ResourceProperties(parent)

    @staticmethod
    def lifetime(parent: Any = None) -> ResourceLifetime:
        return ResourceLifetime(parent)

    @staticmethod
    def get_resource_property(resource_property: str, parent: Any = None) -> GetResourceProperty:
        return GetResourceProperty(resource_property, parent)

    @staticmethod
    def set_resource_properties(parent: Any = None) -> SetResourceProperties:
        return SetResourceProperties(parent)
