"""Cross-cutting integration tests for concurrent request handling.

Commands sent to one session are serialized, so every submitted line must
be committed exactly once no matter how requests interleave.

Note: These tests use ThreadPoolExecutor to simulate concurrent requests.
FastAPI's TestClient is thread-safe for this purpose.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable


def run_concurrent(tasks: list[Callable], max_workers: int = 10) -> list:
    """Run multiple tasks concurrently and collect results.

    Args:
        tasks: List of callable functions to execute.
        max_workers: Maximum number of concurrent threads.

    Returns:
        List of results from each task (in completion order).
    """
    results = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(task) for task in tasks]
        for future in as_completed(futures):
            results.append(future.result())
    return results


class TestConcurrentCommands:
    """Tests for concurrent commands against one session."""

    def test_concurrent_mkdir_all_committed(self, client_with_registry, session_id):
        client, registry = client_with_registry

        tasks = [
            lambda i=i: client.post(
                f"/sessions/{session_id}/execute", json={"line": f"mkdir dir{i}"}
            )
            for i in range(20)
        ]
        responses = run_concurrent(tasks)

        assert all(response.status_code == 200 for response in responses)
        session = registry.get(session_id)
        assert session.filesystem.revision == 20
        assert len(session.state.command_history) == 20
        names = [entry.name for entry in session.filesystem.list_directory("/home/user")]
        assert len(names) == 21

    def test_revisions_are_unique(self, client_with_registry, session_id):
        """Test that each mutation observed its own filesystem revision."""
        client, _ = client_with_registry

        tasks = [
            lambda i=i: client.post(
                f"/sessions/{session_id}/execute", json={"line": f"touch file{i}"}
            ).json()["filesystem_revision"]
            for i in range(15)
        ]
        revisions = run_concurrent(tasks)

        assert sorted(revisions) == list(range(1, 16))


class TestConcurrentSessions:
    """Tests for concurrent activity across sessions."""

    def test_concurrent_creation(self, client_with_registry):
        client, registry = client_with_registry

        responses = run_concurrent([lambda: client.post("/sessions") for _ in range(10)])

        ids = {response.json()["session_id"] for response in responses}
        assert len(ids) == 10
        assert len(registry) == 10
