"""
Shared fixtures for global_proxy tests.
"""
import httpx
import pytest
from global_proxy import BaseAdapter, register_adapter

PROXY_ENV_VARS = [
    "HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "ALLPROXY", "NO_PROXY",
]

class TrackingTransport(httpx.MockTransport):
    """Mock transport that remembers whether it was closed."""

    def __init__(self, handler):
        super().__init__(handler)
        self.closed = False
        self.aclosed = False

    def close(self) -> None:
        self.closed = True

    async def aclose(self) -> None:
        self.aclosed = True

def _responder(label: str, proxy_url: str = None) -> TrackingTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"via": label, "proxy": proxy_url, "url": str(request.url)})
    return TrackingTransport(handler)

class RecordingAdapter(BaseAdapter):
    """Builds mock transports that report which agent served a request."""

    created = []
    options = []

    @property
    def name(self) -> str:
        return "recording"

    def create_http_agent(self, proxy_url, async_client=False, **options):
        self.created.append(("http", proxy_url))
        self.options.append(options)
        return _responder("plain", proxy_url)

    def create_https_agent(self, proxy_url, async_client=False, **options):
        self.created.append(("https", proxy_url))
        self.options.append(options)
        return _responder("secure", proxy_url)

    def create_socks_agent(self, proxy_url, async_client=False, **options):
        self.created.append(("socks", proxy_url))
        self.options.append(options)
        return _responder("socks", proxy_url)

class FailingAdapter(BaseAdapter):
    @property
    def name(self) -> str:
        return "failing"

    def create_http_agent(self, proxy_url, async_client=False, **options):
        raise ValueError("boom")

    def create_https_agent(self, proxy_url, async_client=False, **options):
        raise ValueError("boom")

    def create_socks_agent(self, proxy_url, async_client=False, **options):
        raise ValueError("boom")

register_adapter(RecordingAdapter)
register_adapter(FailingAdapter)

@pytest.fixture(autouse=True)
def clean_proxy_env(monkeypatch):
    """Remove proxy variables inherited from the test runner's shell."""
    for name in PROXY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
    RecordingAdapter.created.clear()
    RecordingAdapter.options.clear()

@pytest.fixture
def direct_transport():
    return _responder("direct")
