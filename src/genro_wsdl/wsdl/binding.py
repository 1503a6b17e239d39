# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""``<wsdl:binding>``: concrete SOAP or HTTP protocol details for a portType.

Most per-operation helpers (headers, MIME, HTTP, operation policies) act
on the most recently added operation, so a binding reads top to bottom:

    >>> wsdl.binding('StockBinding', 'StockPortType') \\
    ...     .operation('GetQuote', 'urn:GetQuote') \\
    ...     .header('AuthHeader', 'credentials') \\
    ...     .header_fault('AuthFault', 'detail', BindingUse.LITERAL) \\
    ...     .operation('Upload', 'urn:Upload') \\
    ...     .input_mime().soap_body_part().mime_part('file', 'image/png').end() \\
    ...     .end()

Calling one of these helpers before any operation exists raises
InvalidOperationException.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from ..documentation import Documented
from ..enums import BindingStyle, BindingUse
from ..exceptions import InvalidArgumentException, InvalidOperationException
from ..extensions.http import HttpBinding, HttpOperation, HttpUrlEncoded, HttpUrlReplacement
from ..extensions.mime import MimeMultipartRelated
from ..extensions.policy import Policy, PolicyAttachment
from ..namespaces import SOAP_HTTP_TRANSPORT
from ..validations import EnumValue
from .port_type import AddressingActions
from .soap import Header, binding_use

if TYPE_CHECKING:
    from .document import Wsdl

binding_style = EnumValue(BindingStyle)

INPUT = 'input'
OUTPUT = 'output'


class BindingOperation(PolicyAttachment):
    """A concrete operation: soapAction, style/use, headers, MIME and HTTP details."""

    def __init__(self, name: str, soap_action: str, style: BindingStyle, use: BindingUse) -> None:
        super().__init__()
        self.name = name
        self.soap_action = soap_action
        self.style = style
        self.use = use
        self._headers: list[Header] = []
        self._input_mime: MimeMultipartRelated | None = None
        self._output_mime: MimeMultipartRelated | None = None
        self._http_operation: HttpOperation | None = None
        self._http_url_encoded: HttpUrlEncoded | None = None
        self._http_url_replacement: HttpUrlReplacement | None = None

    def add_header(self, header: Header) -> None:
        self._headers.append(header)

    def get_headers(self) -> tuple[Header, ...]:
        return tuple(self._headers)

    def set_input_mime(self, mime: MimeMultipartRelated) -> BindingOperation:
        self._input_mime = mime
        return self

    def set_output_mime(self, mime: MimeMultipartRelated) -> BindingOperation:
        self._output_mime = mime
        return self

    def get_input_mime(self) -> MimeMultipartRelated | None:
        return self._input_mime

    def get_output_mime(self) -> MimeMultipartRelated | None:
        return self._output_mime

    def has_mime(self) -> bool:
        return self._input_mime is not None or self._output_mime is not None

    def set_http_operation(self, http_operation: HttpOperation) -> BindingOperation:
        self._http_operation = http_operation
        return self

    def get_http_operation(self) -> HttpOperation | None:
        return self._http_operation

    def set_http_url_encoded(self, url_encoded: HttpUrlEncoded) -> BindingOperation:
        self._http_url_encoded = url_encoded
        return self

    def get_http_url_encoded(self) -> HttpUrlEncoded | None:
        return self._http_url_encoded

    def set_http_url_replacement(self, url_replacement: HttpUrlReplacement) -> BindingOperation:
        self._http_url_replacement = url_replacement
        return self

    def get_http_url_replacement(self) -> HttpUrlReplacement | None:
        return self._http_url_replacement


class Binding(AddressingActions, PolicyAttachment, Documented):
    """A WSDL 1.1 binding of a portType.

    Style and use default to the document's ``default_style`` and
    ``default_use`` at creation time; transport defaults to SOAP over HTTP.
    An ``http_binding()`` turns it into an HTTP binding.
    """

    def __init__(self, wsdl: Wsdl, name: str, port_type: str) -> None:
        super().__init__()
        self._wsdl = wsdl
        self._name = name
        self._port_type = port_type
        self._style = wsdl.get_default_style()
        self._use = wsdl.get_default_use()
        self._transport = SOAP_HTTP_TRANSPORT
        self._operations: dict[str, BindingOperation] = {}
        self._http_binding: HttpBinding | None = None
        self._init_addressing()

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def style(self, style: BindingStyle | str) -> Binding:
        self._style = binding_style(style)
        return self

    def use(self, use: BindingUse | str) -> Binding:
        self._use = binding_use(use)
        return self

    def transport(self, uri: str) -> Binding:
        self._transport = uri
        return self

    def http_binding(self, verb: str) -> Binding:
        self._http_binding = HttpBinding(verb)
        return self

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def operation(
        self,
        name: str,
        soap_action: str,
        style: BindingStyle | str | None = None,
        use: BindingUse | str | None = None,
    ) -> Binding:
        """Add an operation. Style and use fall back to the binding's current values."""
        self._operations[name] = BindingOperation(
            name,
            soap_action,
            binding_style(style) if style is not None else self._style,
            binding_use(use) if use is not None else self._use,
        )
        return self

    def _last_operation(self, target: str) -> BindingOperation:
        if not self._operations:
            raise InvalidOperationException(f'No operation exists to {target}')
        return next(reversed(self._operations.values()))

    def header(
        self,
        message: str,
        part: str,
        use: BindingUse | str | None = None,
        namespace: str | None = None,
        encoding_style: str | None = None,
    ) -> Binding:
        operation = self._last_operation('add header to')
        header = Header(message, part)
        if use is not None:
            header.use(use)
        if namespace is not None:
            header.namespace(namespace)
        if encoding_style is not None:
            header.encoding_style(encoding_style)
        operation.add_header(header)
        return self

    def header_fault(self, message: str, part: str, use: BindingUse | str) -> Binding:
        """Add a header fault to the last header of the last operation."""
        operation = self._last_operation('add header fault to')
        headers = operation.get_headers()
        if not headers:
            raise InvalidOperationException('No header exists to add fault to')
        headers[-1].header_fault(message, part).use(use)
        return self

    def input_mime(self) -> MimeMultipartRelated:
        mime = MimeMultipartRelated(self)
        self._last_operation('add MIME to').set_input_mime(mime)
        return mime

    def output_mime(self) -> MimeMultipartRelated:
        mime = MimeMultipartRelated(self)
        self._last_operation('add MIME to').set_output_mime(mime)
        return mime

    def mime_multipart(self, direction: str) -> MimeMultipartRelated:
        """Dispatch to ``input_mime()`` or ``output_mime()``.

        Raises:
            InvalidArgumentException: If direction is not 'input' or 'output'.
        """
        if direction == INPUT:
            return self.input_mime()
        if direction == OUTPUT:
            return self.output_mime()
        raise InvalidArgumentException(f"Invalid direction '{direction}', expected 'input' or 'output'")

    def http_operation(self, location: str) -> Binding:
        self._last_operation('add HTTP operation to').set_http_operation(HttpOperation(location))
        return self

    def http_url_encoded(self) -> Binding:
        self._last_operation('add HTTP URL-encoded to').set_http_url_encoded(HttpUrlEncoded())
        return self

    def http_url_replacement(self) -> Binding:
        self._last_operation('add HTTP URL-replacement to').set_http_url_replacement(HttpUrlReplacement())
        return self

    def operation_policy(self, id: str | None = None, name: str | None = None) -> Policy:
        """Attach an inline policy to the last operation; its ``end()`` returns this binding."""
        operation = self._last_operation('attach a policy to')
        policy = Policy(id, name, self)
        operation.add_policy(policy)
        return policy

    def operation_policy_reference(
        self, uri: str, digest: str | None = None, digest_algorithm: str | None = None
    ) -> Binding:
        self._last_operation('attach a policy to').policy_reference(uri, digest, digest_algorithm)
        return self

    def end(self) -> Wsdl:
        return self._wsdl

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_name(self) -> str:
        return self._name

    def get_port_type(self) -> str:
        return self._port_type

    def get_style(self) -> BindingStyle:
        return self._style

    def get_use(self) -> BindingUse:
        return self._use

    def get_transport(self) -> str:
        return self._transport

    def get_operations(self) -> MappingProxyType[str, BindingOperation]:
        return MappingProxyType(self._operations)

    def get_http_binding(self) -> HttpBinding | None:
        return self._http_binding

    def is_http(self) -> bool:
        return self._http_binding is not None
