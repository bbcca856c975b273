"""Builder for topic creation requests."""

from typing import Iterable

from google.pubsub_v1 import types as pubsub_types

from pubsub_admin.builders.types import KeyValuePairs
from pubsub_admin.models.resource import Topic


class CreateTopicBuilder:
    """Create a Cloud Pub/Sub topic configuration."""

    def __init__(self, topic: Topic):
        self._proto = pubsub_types.Topic(name=topic.full_name())

    def add_label(self, key: str, value: str) -> "CreateTopicBuilder":
        self._proto.labels[key] = value
        return self

    def set_labels(self, labels: KeyValuePairs) -> "CreateTopicBuilder":
        self._proto.labels = dict(labels)
        return self

    def clear_labels(self) -> "CreateTopicBuilder":
        self._proto.labels = {}
        return self

    def add_allowed_persistence_region(self, region: str) -> "CreateTopicBuilder":
        policy = pubsub_types.MessageStoragePolicy(self._proto.message_storage_policy)
        policy.allowed_persistence_regions.append(region)
        self._proto.message_storage_policy = policy
        return self

    def set_allowed_persistence_regions(self, regions: Iterable[str]) -> "CreateTopicBuilder":
        self._proto.message_storage_policy = pubsub_types.MessageStoragePolicy(
            allowed_persistence_regions=list(regions)
        )
        return self

    def clear_allowed_persistence_regions(self) -> "CreateTopicBuilder":
        del self._proto.message_storage_policy
        return self

    def set_kms_key_name(self, kms_key_name: str) -> "CreateTopicBuilder":
        self._proto.kms_key_name = kms_key_name
        return self

    def as_proto(self) -> pubsub_types.Topic:
        return pubsub_types.Topic(self._proto)

    def take_proto(self) -> pubsub_types.Topic:
        proto, self._proto = self._proto, pubsub_types.Topic()
        return proto
