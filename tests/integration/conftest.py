"""Fixtures for Pub/Sub emulator integration tests."""

import os
import socket
import subprocess
import time

import pytest

from pubsub_admin.config.connection_options import ConnectionOptions

EMULATOR_PORT = 8086  # Non-default port to avoid conflicts
EMULATOR_IMAGE = "gcr.io/google.com/cloudsdktool/google-cloud-cli:emulators"


def wait_for_port(port: int, timeout: float) -> None:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            with socket.create_connection(("localhost", port), timeout=1):
                return
        except OSError:
            time.sleep(0.5)
    raise TimeoutError(f"Pub/Sub emulator did not listen on port {port}")


@pytest.fixture(scope="session")
def pubsub_emulator():
    """Start the Pub/Sub emulator Docker container for the test session."""
    container_name = "pubsub-admin-emulator-test"

    # Clean up any existing container
    subprocess.run(["docker", "rm", "-f", container_name], capture_output=True)

    subprocess.run(
        [
            "docker",
            "run",
            "-d",
            "--name",
            container_name,
            "-p",
            f"{EMULATOR_PORT}:8085",
            EMULATOR_IMAGE,
            "gcloud",
            "beta",
            "emulators",
            "pubsub",
            "start",
            "--host-port=0.0.0.0:8085",
        ],
        check=True,
        capture_output=True,
    )

    # The emulator accepts connections a little before it serves RPCs
    wait_for_port(EMULATOR_PORT, timeout=60)
    time.sleep(5)

    yield f"localhost:{EMULATOR_PORT}"

    # Cleanup
    subprocess.run(["docker", "stop", container_name], capture_output=True)
    subprocess.run(["docker", "rm", container_name], capture_output=True)


@pytest.fixture(scope="session")
def project_id() -> str:
    """Project id for the emulator; any non-empty id is accepted."""
    return os.getenv("GOOGLE_CLOUD_PROJECT", "") or "pubsub-admin-test"


@pytest.fixture(scope="session")
def connection_options(pubsub_emulator) -> ConnectionOptions:
    """Connection options pointed at the emulator."""
    return ConnectionOptions(endpoint=pubsub_emulator, insecure=True)
