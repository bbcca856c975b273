"""Parameter models for the publisher connection."""

from pydantic import Field

from pubsub_admin.models.base import CamelCaseModel


class CreateTopicParams(CamelCaseModel):
    """Parameters for creating a topic."""

    project_id: str
    topic_id: str
    labels: dict[str, str] = Field(default_factory=dict)
    allowed_persistent_regions: list[str] = Field(default_factory=list)
    kms_key_name: str = ""


class DeleteTopicParams(CamelCaseModel):
    """Parameters for deleting a topic."""

    project_id: str
    topic_id: str
