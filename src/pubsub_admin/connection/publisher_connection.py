"""Publisher connection mapping plain parameters to Pub/Sub requests."""

import logging
from typing import Optional

from google.pubsub_v1 import types as pubsub_types

from pubsub_admin.adapters.grpc.publisher import create_default_publisher_stub
from pubsub_admin.config.connection_options import ConnectionOptions
from pubsub_admin.models.context import ClientContext
from pubsub_admin.models.params import CreateTopicParams, DeleteTopicParams
from pubsub_admin.models.resource import Topic
from pubsub_admin.models.status import Status, StatusOr
from pubsub_admin.protocols.publisher import PublisherConnection, PublisherStub

logger = logging.getLogger(__name__)


class PublisherConnectionImpl:
    """
    PublisherConnection backed by a PublisherStub.

    Responsibilities:
    - Assemble request messages from parameter models
    - Issue one stub call per operation with a fresh ClientContext
    """

    def __init__(self, stub: PublisherStub):
        self.stub = stub

    def create_topic(self, params: CreateTopicParams) -> StatusOr[pubsub_types.Topic]:
        request = pubsub_types.Topic(
            name=Topic(params.project_id, params.topic_id).full_name(),
            labels=dict(params.labels),
            kms_key_name=params.kms_key_name,
        )
        if params.allowed_persistent_regions:
            request.message_storage_policy = pubsub_types.MessageStoragePolicy(
                allowed_persistence_regions=list(params.allowed_persistent_regions)
            )
        return self.stub.create_topic(ClientContext(), request)

    def delete_topic(self, params: DeleteTopicParams) -> Status:
        request = pubsub_types.DeleteTopicRequest(
            topic=Topic(params.project_id, params.topic_id).full_name()
        )
        return self.stub.delete_topic(ClientContext(), request)


def make_publisher_connection(
    options: Optional[ConnectionOptions] = None,
) -> PublisherConnection:
    """
    Create a PublisherConnection for ``options``.

    Without options, the defaults apply, pointed at the Pub/Sub emulator when
    PUBSUB_EMULATOR_HOST is set.
    """
    if options is None:
        options = ConnectionOptions.from_environment()
    logger.debug("Creating publisher connection to %s", options.endpoint)
    stub = create_default_publisher_stub(options, channel_id=0)
    return PublisherConnectionImpl(stub)
