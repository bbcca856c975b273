"""gRPC adapter for pubsub_admin stub protocols."""

from pubsub_admin.adapters.grpc.channel import create_channel
from pubsub_admin.adapters.grpc.publisher import (
    DefaultPublisherStub,
    create_default_publisher_stub,
)
from pubsub_admin.adapters.grpc.subscriber import (
    DefaultSubscriberStub,
    create_default_subscriber_stub,
)

__all__ = [
    "DefaultPublisherStub",
    "DefaultSubscriberStub",
    "create_channel",
    "create_default_publisher_stub",
    "create_default_subscriber_stub",
]
