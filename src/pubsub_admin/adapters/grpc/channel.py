"""gRPC channel construction for Pub/Sub stubs."""

import logging

import google.auth
import grpc
from google.auth.transport import grpc as google_auth_grpc
from google.auth.transport import requests as google_auth_requests

from pubsub_admin.config.connection_options import PUBSUB_SCOPES, ConnectionOptions

logger = logging.getLogger(__name__)

# Newer gRPC releases define GRPC_ARG_CHANNEL_ID with this value.
CHANNEL_ID_ARG = "grpc.channel_id"


def create_channel(options: ConnectionOptions, channel_id: int) -> grpc.Channel:
    """
    Create a gRPC channel configured with ``options`` and ``channel_id``.

    ``channel_id`` should be unique among all stubs in the same connection
    pool so they use different underlying connections. Stubs created with the
    same id may share a connection.
    """
    arguments = options.create_channel_arguments()
    arguments.append((CHANNEL_ID_ARG, channel_id))

    if options.insecure:
        logger.debug("Creating insecure channel to %s (channel_id=%d)", options.endpoint, channel_id)
        return grpc.insecure_channel(options.endpoint, options=arguments)

    if options.credentials is not None:
        logger.debug("Creating secure channel to %s (channel_id=%d)", options.endpoint, channel_id)
        return grpc.secure_channel(options.endpoint, options.credentials, options=arguments)

    logger.debug(
        "Creating channel to %s with application default credentials (channel_id=%d)",
        options.endpoint,
        channel_id,
    )
    credentials, _ = google.auth.default(scopes=PUBSUB_SCOPES)
    return google_auth_grpc.secure_authorized_channel(
        credentials,
        google_auth_requests.Request(),
        options.endpoint,
        options=arguments,
    )
