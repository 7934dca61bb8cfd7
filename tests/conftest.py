import sys
from pathlib import Path
from typing import Callable, Dict, List

import httpx
import pytest

# Allow `import favii` without installing the package.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


class FakeSite:
    """Serves canned HTML per URL through httpx.MockTransport and records requests."""

    def __init__(self, pages: Dict[str, bytes]):
        self.pages = pages
        self.requests: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        body = self.pages.get(url)
        if body is None:
            body = self.pages.get(url.rstrip("/"))
        if body is None:
            return httpx.Response(404, content=b"<html><head><title>nope</title></head></html>")
        return httpx.Response(200, content=body, headers={"Content-Type": "text/html"})

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_site() -> Callable[[Dict[str, bytes]], FakeSite]:
    return FakeSite


@pytest.fixture(autouse=True)
def _block_real_network(monkeypatch):
    """Tests must never open real connections."""

    def _blocked(*_args, **_kwargs):
        raise AssertionError("Real HTTP client built during tests")

    import favii.client as client

    monkeypatch.setattr(client, "make_client", _blocked)
