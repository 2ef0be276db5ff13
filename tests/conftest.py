import pytest

from build_server.pipeline.config import ENV_VARS


class RecordingPublisher:
    """In-memory stand-in for LogPublisher."""

    def __init__(self, project_id="test-project"):
        self.project_id = project_id
        self.messages = []
        self.closed = False

    def publish(self, message):
        self.messages.append(message)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the pipeline reads from the environment."""
    for env_names in ENV_VARS.values():
        for env_name in env_names:
            monkeypatch.delenv(env_name, raising=False)
    return monkeypatch
