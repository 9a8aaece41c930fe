import httpx
import pytest


@pytest.fixture
def make_transport():
    """Wrap a handler (sync or async) in an httpx.MockTransport."""

    def _make(handler) -> httpx.MockTransport:
        return httpx.MockTransport(handler)

    return _make
