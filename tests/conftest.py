"""Shared fixtures: gRPC error factory and in-memory stub fakes."""

import grpc
import pytest
from google.pubsub_v1 import types as pubsub_types

from pubsub_admin.models.status import Status, StatusOr


class FakeRpcError(grpc.RpcError, grpc.Call):
    """RpcError carrying a status code and details, like a failed gRPC call."""

    def __init__(self, code: grpc.StatusCode, details: str):
        super().__init__(details)
        self._code = code
        self._details = details

    def code(self):
        return self._code

    def details(self):
        return self._details

    def initial_metadata(self):
        return ()

    def trailing_metadata(self):
        return ()

    def is_active(self):
        return False

    def time_remaining(self):
        return None

    def cancel(self):
        return False

    def add_callback(self, callback):
        return False


class InMemorySubscriberStub:
    """SubscriberStub test double keeping subscriptions in a dict."""

    def __init__(self):
        self.subscriptions: dict[str, pubsub_types.Subscription] = {}

    def create_subscription(self, context, request):
        if request.name in self.subscriptions:
            return StatusOr.from_status(
                Status(code=grpc.StatusCode.ALREADY_EXISTS, message="Resource already exists")
            )
        self.subscriptions[request.name] = pubsub_types.Subscription(request)
        return StatusOr.from_value(pubsub_types.Subscription(request))

    def list_subscriptions(self, context, request):
        prefix = f"{request.project}/subscriptions/"
        names = sorted(name for name in self.subscriptions if name.startswith(prefix))
        start = int(request.page_token) if request.page_token else 0
        page_size = request.page_size or len(names) or 1
        page = names[start : start + page_size]
        next_start = start + len(page)
        return StatusOr.from_value(
            pubsub_types.ListSubscriptionsResponse(
                subscriptions=[self.subscriptions[name] for name in page],
                next_page_token=str(next_start) if next_start < len(names) else "",
            )
        )

    def delete_subscription(self, context, request):
        if self.subscriptions.pop(request.subscription, None) is None:
            return Status(code=grpc.StatusCode.NOT_FOUND, message="Resource not found")
        return Status()


class InMemoryPublisherStub:
    """PublisherStub test double keeping topics in a dict."""

    def __init__(self):
        self.topics: dict[str, pubsub_types.Topic] = {}
        self.contexts = []

    def create_topic(self, context, request):
        self.contexts.append(context)
        if request.name in self.topics:
            return StatusOr.from_status(
                Status(code=grpc.StatusCode.ALREADY_EXISTS, message="Resource already exists")
            )
        self.topics[request.name] = pubsub_types.Topic(request)
        return StatusOr.from_value(pubsub_types.Topic(request))

    def delete_topic(self, context, request):
        self.contexts.append(context)
        if self.topics.pop(request.topic, None) is None:
            return Status(code=grpc.StatusCode.NOT_FOUND, message="Resource not found")
        return Status()


@pytest.fixture
def make_rpc_error():
    """Factory for errors raised by a failed gRPC call."""
    return FakeRpcError


@pytest.fixture
def in_memory_subscriber_stub():
    return InMemorySubscriberStub()


@pytest.fixture
def in_memory_publisher_stub():
    return InMemoryPublisherStub()
