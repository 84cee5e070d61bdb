"""
Exceptions raised by the Transmission client. Callers decide on retries.
"""


class TransmissionError(Exception):
    """Base exception for all client errors."""


class InvalidEndpoint(TransmissionError):
    """Raised when the endpoint URL is malformed."""


class TransportError(TransmissionError):
    """Raised on network, DNS or TLS failures. Usually worth retrying."""


class SessionError(TransmissionError):
    """Raised when no usable session token could be obtained."""


class EncodingError(TransmissionError):
    """Raised when an RPC request cannot be serialized to JSON."""


class DecodingError(TransmissionError):
    """Raised when the response body is not a valid RPC envelope."""


class OperationError(TransmissionError):
    """
    Raised when the daemon reports a failure, or an operation's own
    success check does not hold. ``reason`` is the literal string.
    """

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason
