"""Builders for subscription creation requests."""

from datetime import timedelta
from typing import Union

from google.pubsub_v1 import types as pubsub_types

from pubsub_admin.builders.types import KeyValuePairs
from pubsub_admin.models.resource import Subscription, Topic


class PushConfigBuilder:
    """
    Build the push configuration for a subscription.

    Push subscriptions deliver messages by sending an HTTP request to the
    push endpoint, optionally authenticated with an OIDC token.
    """

    def __init__(self, push_endpoint: str):
        self._proto = pubsub_types.PushConfig(push_endpoint=push_endpoint)

    def add_attribute(self, key: str, value: str) -> "PushConfigBuilder":
        self._proto.attributes[key] = value
        return self

    def set_attributes(self, attributes: KeyValuePairs) -> "PushConfigBuilder":
        """Replace all attributes. Duplicated keys keep the last value."""
        self._proto.attributes = dict(attributes)
        return self

    def set_authentication(
        self, token: pubsub_types.PushConfig.OidcToken
    ) -> "PushConfigBuilder":
        self._proto.oidc_token = token
        return self

    def set_service_account_email(self, email: str) -> "PushConfigBuilder":
        """Set the OIDC service account, keeping any audience already configured."""
        token = pubsub_types.PushConfig.OidcToken(self._proto.oidc_token)
        token.service_account_email = email
        self._proto.oidc_token = token
        return self

    @staticmethod
    def make_oidc_token(
        service_account_email: str, audience: str = ""
    ) -> pubsub_types.PushConfig.OidcToken:
        token = pubsub_types.PushConfig.OidcToken(service_account_email=service_account_email)
        if audience:
            token.audience = audience
        return token

    def as_proto(self) -> pubsub_types.PushConfig:
        """Return a copy of the push configuration; the builder is unchanged."""
        return pubsub_types.PushConfig(self._proto)

    def take_proto(self) -> pubsub_types.PushConfig:
        """Hand over the push configuration and reset the builder to an empty one."""
        proto, self._proto = self._proto, pubsub_types.PushConfig()
        return proto


class CreateSubscriptionBuilder:
    """Create a Cloud Pub/Sub subscription configuration."""

    def __init__(self, subscription: Subscription, topic: Topic):
        self._proto = pubsub_types.Subscription(
            name=subscription.full_name(),
            topic=topic.full_name(),
        )

    def add_label(self, key: str, value: str) -> "CreateSubscriptionBuilder":
        self._proto.labels[key] = value
        return self

    def set_labels(self, labels: KeyValuePairs) -> "CreateSubscriptionBuilder":
        self._proto.labels = dict(labels)
        return self

    def clear_labels(self) -> "CreateSubscriptionBuilder":
        self._proto.labels = {}
        return self

    def set_push_config(
        self, push_config: Union[PushConfigBuilder, pubsub_types.PushConfig]
    ) -> "CreateSubscriptionBuilder":
        if isinstance(push_config, PushConfigBuilder):
            push_config = push_config.as_proto()
        self._proto.push_config = push_config
        return self

    def set_ack_deadline(
        self, ack_deadline: Union[int, timedelta]
    ) -> "CreateSubscriptionBuilder":
        if isinstance(ack_deadline, timedelta):
            ack_deadline = int(ack_deadline.total_seconds())
        self._proto.ack_deadline_seconds = ack_deadline
        return self

    def set_retain_acked_messages(self, retain: bool) -> "CreateSubscriptionBuilder":
        self._proto.retain_acked_messages = retain
        return self

    def set_message_retention_duration(
        self, duration: timedelta
    ) -> "CreateSubscriptionBuilder":
        self._proto.message_retention_duration = duration
        return self

    def set_enable_message_ordering(self, enable: bool) -> "CreateSubscriptionBuilder":
        self._proto.enable_message_ordering = enable
        return self

    def set_filter(self, filter_expression: str) -> "CreateSubscriptionBuilder":
        self._proto.filter = filter_expression
        return self

    def as_proto(self) -> pubsub_types.Subscription:
        return pubsub_types.Subscription(self._proto)

    def take_proto(self) -> pubsub_types.Subscription:
        proto, self._proto = self._proto, pubsub_types.Subscription()
        return proto
