# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""WS-* extension vocabularies.

WS-Policy, WS-Addressing, MIME and HTTP bindings are rendered by the WSDL
1.1 generator. The other modules are configuration containers: their
``*Policy`` factories return assertion records for
``Policy.assertion_from()`` and their builders expose ``get_config()`` /
``to_dict()``.

Example:
    >>> from genro_wsdl.extensions import SecurityPolicy, MtomPolicy
    >>> wsdl.binding('SecureBinding', 'StockPortType') \\
    ...     .policy('Secure') \\
    ...         .all() \\
    ...             .assertion_from(SecurityPolicy.username_token()) \\
    ...             .assertion_from(MtomPolicy.optimized_mime_serialization()) \\
    ...         .end() \\
    ...     .end()
"""

from .addressing import (
    Action,
    AddressingMetadata,
    AddressingVersion,
    EndpointReference,
    ReferenceParameters,
)
from .discovery import Bye, DiscoveryPolicy, Hello, Probe, ProbeMatch, ScopeMatchType, Scopes
from .eventing import Delivery, DeliveryMode, EventingPolicy, Filter, Subscribe, Subscription
from .http import HttpBinding, HttpOperation, HttpUrlEncoded, HttpUrlReplacement
from .metadata_exchange import (
    GetMetadata,
    MetadataDialect,
    MetadataExchangePolicy,
    MetadataReference,
    MetadataSection,
    MetadataSet,
    StructuredContent,
    TextContent,
)
from .mime import MimeContent, MimeMultipartRelated, MimePart, MimeXml
from .mtom import ContentTransferEncoding, MtomPolicy, XopInclude
from .notification import (
    NotificationConsumer,
    NotificationPolicy,
    NotificationProducer,
    NotificationSubscribe,
    Topic,
    TopicDialect,
    TopicExpression,
)
from .policy import (
    ConfigBuilder,
    Policy,
    PolicyAssertion,
    PolicyAttachment,
    PolicyOperator,
    PolicyReference,
    policy_record,
)
from .resource_framework import (
    GetResourceProperty,
    Resource,
    ResourceFrameworkPolicy,
    ResourceLifetime,
    ResourceProperties,
    ResourceProperty,
    SetResourceProperties,
)
from .security import (
    AlgorithmSuite,
    SecurityPolicy,
    SecurityTokenInclusion,
    TokenAssertion,
    TransportBinding,
    TransportToken,
)
from .transaction import (
    AtomicTransaction,
    BusinessActivity,
    TransactionFlow,
    TransactionFlowType,
    TransactionPolicy,
)
from .trust import (
    Claims,
    IssuedToken,
    KeyType,
    RequestSecurityToken,
    SecureConversation,
    TokenType,
    TrustPolicy,
)

__all__ = [
    'Action',
    'AddressingMetadata',
    'AddressingVersion',
    'AlgorithmSuite',
    'AtomicTransaction',
    'BusinessActivity',
    'Bye',
    'Claims',
    'ConfigBuilder',
    'ContentTransferEncoding',
    'Delivery',
    'DeliveryMode',
    'DiscoveryPolicy',
    'EndpointReference',
    'EventingPolicy',
    'Filter',
    'GetMetadata',
    'GetResourceProperty',
    'Hello',
    'HttpBinding',
    'HttpOperation',
    'HttpUrlEncoded',
    'HttpUrlReplacement',
    'IssuedToken',
    'KeyType',
    'MetadataDialect',
    'MetadataExchangePolicy',
    'MetadataReference',
    'MetadataSection',
    'MetadataSet',
    'MimeContent',
    'MimeMultipartRelated',
    'MimePart',
    'MimeXml',
    'MtomPolicy',
    'NotificationConsumer',
    'NotificationPolicy',
    'NotificationProducer',
    'NotificationSubscribe',
    'Policy',
    'PolicyAssertion',
    'PolicyAttachment',
    'PolicyOperator',
    'PolicyReference',
    'Probe',
    'ProbeMatch',
    'ReferenceParameters',
    'RequestSecurityToken',
    'Resource',
    'ResourceFrameworkPolicy',
    'ResourceLifetime',
    'ResourceProperties',
    'ResourceProperty',
    'ScopeMatchType',
    'Scopes',
    'SecureConversation',
    'SecurityPolicy',
    'SecurityTokenInclusion',
    'SetResourceProperties',
    'StructuredContent',
    'Subscribe',
    'Subscription',
    'TextContent',
    'TokenAssertion',
    'TokenType',
    'Topic',
    'TopicDialect',
    'TopicExpression',
    'TransactionFlow',
    'TransactionFlowType',
    'TransactionPolicy',
    'TransportBinding',
    'TransportToken',
    'TrustPolicy',
    'XopInclude',
    'policy_record',
]
