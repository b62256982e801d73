"""Errors raised while getting templates from a store.

Every error is terminal for the command that triggered it. The str() of each
error is the message shown to the user.
"""


class TemplateStoreError(Exception):
    """Base class for template store failures."""


class RequestConstructionError(TemplateStoreError):
    """The store URL cannot be turned into a GET request."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"error while trying to create request to take template info: {detail}")
        self.detail = detail


class TransportError(TemplateStoreError):
    """The request failed on the network, including timeouts."""

    def __init__(self, detail: str, *, is_timeout: bool) -> None:
        super().__init__(f"error while requesting template list: {detail}")
        self.detail = detail
        self.is_timeout = is_timeout


class UnexpectedStatusError(TemplateStoreError):
    """The store answered with a status other than the wanted one."""

    def __init__(self, *, wanted: int, got: int) -> None:
        super().__init__(f"unexpected status code wanted: {wanted} got: {got}")
        self.wanted = wanted
        self.got = got


class EmptyBodyError(TemplateStoreError):
    """The store answered without a body."""

    def __init__(self, url: str) -> None:
        super().__init__(f"error empty response body from: {url}")
        self.url = url


class BodyReadError(TemplateStoreError):
    """The response body could not be read to the end."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"error while reading data from templates body: {detail}")
        self.detail = detail


class DecodeError(TemplateStoreError):
    """The body is not a JSON array of template objects."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"error while unmarshalling into templates struct: {detail}")
        self.detail = detail
