"""gRPC subscriber stub implementing the SubscriberStub protocol."""

import logging
from typing import Any

import grpc
from google.pubsub_v1 import types as pubsub_types
from google.pubsub_v1.services.subscriber.transports.grpc import SubscriberGrpcTransport

from pubsub_admin.adapters.grpc.channel import create_channel
from pubsub_admin.config.connection_options import ConnectionOptions
from pubsub_admin.models.context import ClientContext
from pubsub_admin.models.status import Status, StatusOr
from pubsub_admin.protocols.subscriber import SubscriberStub

logger = logging.getLogger(__name__)


class DefaultSubscriberStub:
    """
    Forward subscriber calls to the generated gRPC transport.

    Each method issues exactly one RPC. A grpc.RpcError is returned as a
    failed status with the RPC's code and details; nothing is retried.
    """

    def __init__(self, grpc_stub: Any):
        self._grpc_stub = grpc_stub

    def create_subscription(
        self, context: ClientContext, request: pubsub_types.Subscription
    ) -> StatusOr[pubsub_types.Subscription]:
        try:
            response = self._grpc_stub.create_subscription(request, **context.call_kwargs())
        except grpc.RpcError as e:
            return StatusOr.from_status(Status.from_rpc_error(e))
        return StatusOr.from_value(response)

    def list_subscriptions(
        self, context: ClientContext, request: pubsub_types.ListSubscriptionsRequest
    ) -> StatusOr[pubsub_types.ListSubscriptionsResponse]:
        try:
            response = self._grpc_stub.list_subscriptions(request, **context.call_kwargs())
        except grpc.RpcError as e:
            return StatusOr.from_status(Status.from_rpc_error(e))
        return StatusOr.from_value(response)

    def delete_subscription(
        self, context: ClientContext, request: pubsub_types.DeleteSubscriptionRequest
    ) -> Status:
        try:
            self._grpc_stub.delete_subscription(request, **context.call_kwargs())
        except grpc.RpcError as e:
            return Status.from_rpc_error(e)
        return Status()


def create_default_subscriber_stub(options: ConnectionOptions, channel_id: int) -> SubscriberStub:
    """
    Create a SubscriberStub configured with ``options`` and ``channel_id``.

    ``channel_id`` should be unique among all stubs in the same connection
    pool, to ensure they use different underlying connections.
    """
    channel = create_channel(options, channel_id)
    transport = SubscriberGrpcTransport(host=options.endpoint, channel=channel)
    logger.debug("Created subscriber stub for %s", options.endpoint)
    return DefaultSubscriberStub(transport)
