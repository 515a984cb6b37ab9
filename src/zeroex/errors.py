"""Exceptions raised by the 0x quote client and transaction builder.

Every failure is surfaced to the caller as its own exception type so
callers can branch on the kind of error:

- InvalidChainIdError: no 0x endpoint for the requested network
- TransportError: DNS, connection or timeout failure in the HTTP layer
- UnexpectedStatusError: the API answered with anything other than 200
- MalformedResponseError: a 200 body that does not decode into a quote
- MissingFieldError / FieldParseError: quote cannot become a transaction
"""


class ZeroExClientError(Exception):
    """Base exception for all client errors."""
    pass


class InvalidChainIdError(ZeroExClientError):
    """Raised when a chain id has no known 0x API endpoint."""

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Invalid chain id: {chain_id}")


class TransportError(ZeroExClientError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to get quote: {type(cause).__name__}: {cause}")


class UnexpectedStatusError(ZeroExClientError):
    """Raised when the API responds with a non-200 status code."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Unexpected status code from 0x API: {status_code}")


class MalformedResponseError(ZeroExClientError):
    """Raised when a 200 response body cannot be decoded into a quote."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Malformed quote response: {cause}")


class TransactionBuildError(ZeroExClientError):
    """Base exception for quote to transaction conversion failures."""
    pass


class MissingFieldError(TransactionBuildError):
    """Raised when a quote lacks a field the transaction needs."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing '{field}' field")


class FieldParseError(TransactionBuildError):
    """Raised when a quote field cannot be parsed into its transaction type."""

    def __init__(self, field: str, cause: Exception):
        self.field = field
        self.cause = cause
        super().__init__(f"Invalid '{field}' field: {cause}")
