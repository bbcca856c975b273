"""Resource identifiers for Pub/Sub topics and subscriptions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Topic:
    """A Pub/Sub topic, identified by project id and topic id."""

    project_id: str
    topic_id: str

    def full_name(self) -> str:
        """Return the fully-qualified name, e.g. 'projects/my-project/topics/my-topic'."""
        return f"projects/{self.project_id}/topics/{self.topic_id}"

    def __str__(self) -> str:
        return self.full_name()


@dataclass(frozen=True)
class Subscription:
    """A Pub/Sub subscription, identified by project id and subscription id."""

    project_id: str
    subscription_id: str

    def full_name(self) -> str:
        """Return the fully-qualified name, e.g. 'projects/my-project/subscriptions/my-sub'."""
        return f"projects/{self.project_id}/subscriptions/{self.subscription_id}"

    def __str__(self) -> str:
        return self.full_name()
