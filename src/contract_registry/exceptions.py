"""Exception hierarchy for contract_registry.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ContractRegistryError for easy catching of any
registry-client error.
"""

from __future__ import annotations


class ContractRegistryError(Exception):
    """Base exception for all contract_registry errors."""

    pass


class SchemaError(ContractRegistryError):
    """Raised when a wire message schema is invalid.

    Examples:
        - Field declared without a protobuf field number
        - Two fields sharing the same field number
        - Unsupported field annotation
    """

    pass


class EncodeError(ContractRegistryError):
    """Raised when a value cannot be put on the wire.

    Examples:
        - Empty contract name in a request identity
        - Field value of the wrong type
    """

    pass


class DecodeError(ContractRegistryError):
    """Raised when bytes cannot be interpreted.

    Examples:
        - Invalid protobuf payload
        - ABI bytes that are not UTF-8 encoded JSON
        - Odd-length or non-hex bytecode strings
    """

    pass


class TransportError(ContractRegistryError):
    """Raised by a transport when a remote call fails.

    The client never wraps or interprets this error; it reaches the caller
    exactly as the transport raised it.

    Attributes:
        method: Fully-qualified method path of the failed call
        code: Status code name reported by the transport (e.g. "NOT_FOUND")
        details: Human-readable failure details
    """

    def __init__(self, method: str, code: str, details: str = "") -> None:
        self.method = method
        self.code = code
        self.details = details
        message = f"{method} failed with {code}"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)
