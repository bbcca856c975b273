"""Status models for standardized error handling in Pub/Sub admin calls."""

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

import grpc
from pydantic import field_serializer

from pubsub_admin.models.base import CamelCaseModel

T = TypeVar("T")


class Status(CamelCaseModel):
    """Outcome of a single RPC: a gRPC status code and a message."""

    code: grpc.StatusCode = grpc.StatusCode.OK
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.code == grpc.StatusCode.OK

    @field_serializer("code")
    def _serialize_code(self, code: grpc.StatusCode) -> str:
        return code.name

    @classmethod
    def from_rpc_error(cls, error: grpc.RpcError) -> "Status":
        """
        Translate a failed gRPC call into a Status.

        Errors raised by gRPC calls implement grpc.Call, which exposes the
        status code and details; the details are kept as sent, even when empty.
        Anything else is reported as UNKNOWN with the error text as message.
        """
        code = error.code() if hasattr(error, "code") else None
        details = error.details() if hasattr(error, "details") else None
        return cls(
            code=code if isinstance(code, grpc.StatusCode) else grpc.StatusCode.UNKNOWN,
            message=details if details is not None else str(error),
        )

    def __str__(self) -> str:
        return f"{self.code.name}: {self.message}" if self.message else self.code.name


class StatusOrAccessError(RuntimeError):
    """Raised when reading the value of a failed StatusOr."""

    def __init__(self, status: Status):
        super().__init__(f"StatusOr has no value: {status}")
        self.status = status


@dataclass(frozen=True)
class StatusOr(Generic[T]):
    """
    Either a response value or a non-OK Status.

    Callers must check ``ok`` (or truthiness) before reading ``value``;
    reading the value of a failed result raises StatusOrAccessError.
    """

    _value: Optional[T] = None
    status: Status = field(default_factory=Status)

    def __post_init__(self) -> None:
        if self.status.ok and self._value is None:
            raise ValueError("StatusOr requires a value when the status is OK")
        if not self.status.ok and self._value is not None:
            raise ValueError("StatusOr cannot hold a value with a non-OK status")

    @classmethod
    def from_value(cls, value: T) -> "StatusOr[T]":
        return cls(_value=value)

    @classmethod
    def from_status(cls, status: Status) -> "StatusOr[T]":
        if status.ok:
            raise ValueError("StatusOr requires a non-OK status when no value is given")
        return cls(status=status)

    @property
    def ok(self) -> bool:
        return self.status.ok

    def __bool__(self) -> bool:
        return self.ok

    @property
    def value(self) -> T:
        if not self.ok:
            raise StatusOrAccessError(self.status)
        return self._value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return self._value if self.ok else default  # type: ignore[return-value]
