"""Publisher stub and connection protocol definitions."""

from typing import Protocol, runtime_checkable

from google.pubsub_v1 import types as pubsub_types

from pubsub_admin.models.context import ClientContext
from pubsub_admin.models.params import CreateTopicParams, DeleteTopicParams
from pubsub_admin.models.status import Status, StatusOr


@runtime_checkable
class PublisherStub(Protocol):
    """Synchronous protocol wrapping the generated Pub/Sub Publisher client."""

    def create_topic(
        self, context: ClientContext, request: pubsub_types.Topic
    ) -> StatusOr[pubsub_types.Topic]:
        """
        Create a new topic.

        Args:
            context: Per-call timeout and metadata
            request: Topic to create, with its full name set

        Returns:
            The created topic, or the failed status
        """
        ...

    def delete_topic(
        self, context: ClientContext, request: pubsub_types.DeleteTopicRequest
    ) -> Status:
        """Delete a topic."""
        ...


@runtime_checkable
class PublisherConnection(Protocol):
    """
    Publisher operations taking plain parameters instead of request messages.

    Implementations assemble the request message and delegate to a
    PublisherStub.
    """

    def create_topic(self, params: CreateTopicParams) -> StatusOr[pubsub_types.Topic]:
        """
        Create a topic.

        Args:
            params: Project id, topic id, labels, allowed persistence regions
                and KMS key name

        Returns:
            The created topic, or the failed status
        """
        ...

    def delete_topic(self, params: DeleteTopicParams) -> Status:
        """Delete a topic."""
        ...
