"""Connection options for the Pub/Sub gRPC channel."""

import os
from typing import Any, Optional

import grpc
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENDPOINT = "pubsub.googleapis.com"
EMULATOR_HOST_ENV = "PUBSUB_EMULATOR_HOST"
USER_AGENT = "pubsub-admin-python/0.1.0"

PUBSUB_SCOPES = (
    "https://www.googleapis.com/auth/pubsub",
    "https://www.googleapis.com/auth/cloud-platform",
)


class ConnectionOptions(BaseModel):
    """
    Endpoint, credentials and channel tuning for Pub/Sub connections.

    With no credentials and ``insecure`` unset, channels authenticate with
    Application Default Credentials. The ``set_*`` helpers return updated
    copies so a base configuration can be shared safely.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    endpoint: str = DEFAULT_ENDPOINT
    credentials: Optional[grpc.ChannelCredentials] = None
    insecure: bool = False
    user_agent_prefix: str = ""
    channel_arguments: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_environment(cls) -> "ConnectionOptions":
        """Default options, pointed at the emulator when PUBSUB_EMULATOR_HOST is set."""
        emulator_host = os.getenv(EMULATOR_HOST_ENV, "").strip()
        if emulator_host:
            return cls(endpoint=emulator_host, insecure=True)
        return cls()

    def set_endpoint(self, endpoint: str) -> "ConnectionOptions":
        return self.model_copy(update={"endpoint": endpoint})

    def set_credentials(self, credentials: grpc.ChannelCredentials) -> "ConnectionOptions":
        return self.model_copy(update={"credentials": credentials, "insecure": False})

    def set_insecure(self) -> "ConnectionOptions":
        return self.model_copy(update={"credentials": None, "insecure": True})

    def add_user_agent_prefix(self, prefix: str) -> "ConnectionOptions":
        combined = f"{prefix} {self.user_agent_prefix}".strip()
        return self.model_copy(update={"user_agent_prefix": combined})

    def add_channel_argument(self, name: str, value: Any) -> "ConnectionOptions":
        arguments = dict(self.channel_arguments)
        arguments[name] = value
        return self.model_copy(update={"channel_arguments": arguments})

    def user_agent(self) -> str:
        return f"{self.user_agent_prefix} {USER_AGENT}".strip()

    def create_channel_arguments(self) -> list[tuple[str, Any]]:
        """gRPC channel options: the user agent followed by caller-supplied arguments."""
        arguments: list[tuple[str, Any]] = [("grpc.primary_user_agent", self.user_agent())]
        arguments.extend(self.channel_arguments.items())
        return arguments
