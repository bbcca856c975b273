"""gRPC publisher stub implementing the PublisherStub protocol."""

import logging
from typing import Any

import grpc
from google.pubsub_v1 import types as pubsub_types
from google.pubsub_v1.services.publisher.transports.grpc import PublisherGrpcTransport

from pubsub_admin.adapters.grpc.channel import create_channel
from pubsub_admin.config.connection_options import ConnectionOptions
from pubsub_admin.models.context import ClientContext
from pubsub_admin.models.status import Status, StatusOr
from pubsub_admin.protocols.publisher import PublisherStub

logger = logging.getLogger(__name__)


class DefaultPublisherStub:
    """Forward publisher calls to the generated gRPC transport."""

    def __init__(self, grpc_stub: Any):
        self._grpc_stub = grpc_stub

    def create_topic(
        self, context: ClientContext, request: pubsub_types.Topic
    ) -> StatusOr[pubsub_types.Topic]:
        try:
            response = self._grpc_stub.create_topic(request, **context.call_kwargs())
        except grpc.RpcError as e:
            return StatusOr.from_status(Status.from_rpc_error(e))
        return StatusOr.from_value(response)

    def delete_topic(
        self, context: ClientContext, request: pubsub_types.DeleteTopicRequest
    ) -> Status:
        try:
            self._grpc_stub.delete_topic(request, **context.call_kwargs())
        except grpc.RpcError as e:
            return Status.from_rpc_error(e)
        return Status()


def create_default_publisher_stub(options: ConnectionOptions, channel_id: int) -> PublisherStub:
    """Create a PublisherStub configured with ``options`` and ``channel_id``."""
    channel = create_channel(options, channel_id)
    transport = PublisherGrpcTransport(host=options.endpoint, channel=channel)
    logger.debug("Created publisher stub for %s", options.endpoint)
    return DefaultPublisherStub(transport)
