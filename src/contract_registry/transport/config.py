"""Configuration for registry transports.

This module provides configuration dataclasses for the gRPC transport and the
mock transport used in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass
class TransportConfig:
    """Configuration for the gRPC transport.

    Attributes:
        target: Service endpoint as "host:port"
        timeout: Per-call deadline in seconds (default None = no deadline).
            Without a deadline a call waits as long as the channel does.
        max_message_length: Cap on send/receive message size in bytes
            (default None = grpc default of 4 MiB receive)
        options: Extra grpc channel options as (key, value) pairs

    Examples:
        ```python
        config = TransportConfig("registry.internal:50051", timeout=5.0)
        client = ContractRegistry(config=config)
        ```
    """

    target: str
    timeout: Optional[float] = None
    max_message_length: Optional[int] = None
    options: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        host, sep, port = self.target.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise ValueError(f"target must be host:port, got {self.target!r}")

        if not 0 < int(port) <= 65535:
            raise ValueError(f"target port must be 1-65535, got {port}")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")

        if self.max_message_length is not None and self.max_message_length <= 0:
            raise ValueError(
                f"max_message_length must be > 0, got {self.max_message_length}"
            )

    def channel_options(self) -> list[tuple[str, Any]]:
        """Return grpc channel options for this configuration."""
        options = list(self.options)
        if self.max_message_length is not None:
            options.append(("grpc.max_send_message_length", self.max_message_length))
            options.append(("grpc.max_receive_message_length", self.max_message_length))
        return options


@dataclass
class MockTransportConfig:
    """Configuration for the in-process mock transport.

    Attributes:
        latency: Simulated round-trip delay in seconds (default 0.0)
    """

    latency: float = 0.0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.latency < 0:
            raise ValueError(f"latency must be >= 0, got {self.latency}")
