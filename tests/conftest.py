from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from indexer_cli.commands.actions import cancel as cancel_command

API_URL = "http://indexer.local:18000/"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the CLI at a throwaway config file and clear inherited settings."""
    path = tmp_path / "graph-cli" / "indexer.yml"
    monkeypatch.setenv("GRAPH_INDEXER_CONFIG_FILE", str(path))
    monkeypatch.delenv("GRAPH_INDEXER_API", raising=False)
    monkeypatch.delenv("GRAPH_INDEXER_TIMEOUT", raising=False)
    monkeypatch.delenv("GRAPH_INDEXER_LOG_LEVEL", raising=False)
    return path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class FakeClient:
    def __init__(self, url: str, timeout: float):
        self.url = url
        self.timeout = timeout
        self.closed = False

    def __enter__(self) -> "FakeClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.closed = True


class FakeBackend:
    """Stands in for the client factory and the cancelActions mutation."""

    def __init__(self) -> None:
        self.response: List[Dict[str, Any]] = []
        self.error: Exception | None = None
        self.clients: List[FakeClient] = []
        self.cancel_calls: List[List[int]] = []

    def create_client(self, url: str, timeout: float = 30.0) -> FakeClient:
        client = FakeClient(url, timeout)
        self.clients.append(client)
        return client

    def cancel_actions(self, client: FakeClient, action_ids: List[int]) -> List[Dict[str, Any]]:
        self.cancel_calls.append(list(action_ids))
        if self.error is not None:
            raise self.error
        return [dict(action) for action in self.response]


@pytest.fixture
def backend(monkeypatch) -> FakeBackend:
    monkeypatch.setenv("GRAPH_INDEXER_API", API_URL)
    fake = FakeBackend()
    monkeypatch.setattr(cancel_command, "create_indexer_management_client", fake.create_client)
    monkeypatch.setattr(cancel_command, "cancel_actions", fake.cancel_actions)
    return fake


@pytest.fixture
def canceled_action() -> Dict[str, Any]:
    return {
        "id": 1,
        "type": "allocate",
        "allocationID": None,
        "deploymentID": "QmfWRZCjT8pri4Amey3e3mb2Bga75Vuh2fPYyNVnmPYL66",
        "amount": "10000",
        "poi": None,
        "force": False,
        "source": "indexerAgent",
        "reason": "manual",
        "priority": 0,
        "transaction": None,
        "status": "canceled",
        "failureReason": None,
        "protocolNetwork": "eip155:1",
    }
