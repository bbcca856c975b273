"""Subscriber stub protocol definitions."""

from typing import Protocol, runtime_checkable

from google.pubsub_v1 import types as pubsub_types

from pubsub_admin.models.context import ClientContext
from pubsub_admin.models.status import Status, StatusOr


@runtime_checkable
class SubscriberStub(Protocol):
    """
    Synchronous protocol wrapping the generated Pub/Sub Subscriber client.

    The wrapper exists so that:
    - Calls return a StatusOr (or a Status) instead of raising grpc.RpcError.
    - The stub can be replaced by a test double.
    - Cross-cutting concerns (metadata, logging, retry) can be layered on top.
    """

    def create_subscription(
        self, context: ClientContext, request: pubsub_types.Subscription
    ) -> StatusOr[pubsub_types.Subscription]:
        """
        Create a new subscription.

        Args:
            context: Per-call timeout and metadata
            request: Subscription to create, with full name and topic set

        Returns:
            The created subscription, or the failed status
        """
        ...

    def list_subscriptions(
        self, context: ClientContext, request: pubsub_types.ListSubscriptionsRequest
    ) -> StatusOr[pubsub_types.ListSubscriptionsResponse]:
        """
        List one page of subscriptions in a project.

        Resubmit the response's next_page_token to fetch the following page.
        """
        ...

    def delete_subscription(
        self, context: ClientContext, request: pubsub_types.DeleteSubscriptionRequest
    ) -> Status:
        """Delete a subscription."""
        ...
