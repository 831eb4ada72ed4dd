import pytest


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch):
    """Keep debug logging inside the test's temp directory."""
    path = tmp_path / "cupcake-debug.log"
    monkeypatch.setenv("CUPCAKE_DEBUG_LOG", str(path))
    return path
