"""Per-call context for Pub/Sub RPCs."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ClientContext:
    """
    Per-call options handed to the gRPC transport.

    A context describes a single RPC: the deadline (as a timeout in seconds)
    and the request metadata. gRPC enforces the deadline, not this layer.
    """

    timeout: Optional[float] = None
    metadata: list[tuple[str, str]] = field(default_factory=list)

    def add_metadata(self, key: str, value: str) -> "ClientContext":
        self.metadata.append((key, value))
        return self

    def call_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for a gRPC unary-unary multicallable."""
        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if self.metadata:
            kwargs["metadata"] = tuple(self.metadata)
        return kwargs
