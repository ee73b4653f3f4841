"""Errors raised while consulting the external food database."""


class ExternalLookupError(Exception):
    """Base class for fatal external lookup failures."""

    kind = "external_lookup_error"


class LookupNetworkError(ExternalLookupError):
    """The HTTP call itself failed (DNS, connection, transport timeout)."""

    kind = "network_error"


class LookupHttpError(ExternalLookupError):
    """The external database answered with a non-2xx status."""

    kind = "off_http_error"

    def __init__(self, status: int, detail: str) -> None:
        super().__init__(f"HTTP {status}: {detail}")
        self.status = status
        self.detail = detail


class LookupBadJsonError(ExternalLookupError):
    """The external database answered 2xx with a body that is not JSON."""

    kind = "off_bad_json"
