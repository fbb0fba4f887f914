"""
httpx transports that route each request through the proxy interceptor.
"""
import logging
from typing import Any, Optional
import httpx
from .interceptor import ProxyInterceptor
from .models import RequestConfig

logger = logging.getLogger(__name__)

# Request extensions a caller can set to pin the agent for a single request:
#   client.get(url, extensions={"https_agent": my_transport})
HTTP_AGENT_EXTENSION = "http_agent"
HTTPS_AGENT_EXTENSION = "https_agent"

def _request_config(
    request: httpx.Request,
    http_agent: Any,
    https_agent: Any
) -> RequestConfig:
    return RequestConfig(
        url=str(request.url),
        http_agent=request.extensions.get(HTTP_AGENT_EXTENSION) or http_agent,
        https_agent=request.extensions.get(HTTPS_AGENT_EXTENSION) or https_agent,
    )

class ProxyRoutingTransport(httpx.BaseTransport):
    """Sync transport choosing a proxy agent or the direct transport per request."""

    def __init__(
        self,
        interceptor: ProxyInterceptor,
        transport: Optional[httpx.BaseTransport] = None,
        http_agent: Optional[httpx.BaseTransport] = None,
        https_agent: Optional[httpx.BaseTransport] = None,
    ):
        self.interceptor = interceptor
        self.direct = transport or httpx.HTTPTransport()
        self.http_agent = http_agent
        self.https_agent = https_agent

    def route(self, request: httpx.Request) -> httpx.BaseTransport:
        """Pick the transport that will send ``request``."""
        config = self.interceptor(_request_config(request, self.http_agent, self.https_agent))
        return config.agent_for_scheme(request.url.scheme) or self.direct

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self.route(request).handle_request(request)

    def close(self) -> None:
        self.direct.close()

class AsyncProxyRoutingTransport(httpx.AsyncBaseTransport):
    """Async counterpart of ProxyRoutingTransport."""

    def __init__(
        self,
        interceptor: ProxyInterceptor,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_agent: Optional[httpx.AsyncBaseTransport] = None,
        https_agent: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.interceptor = interceptor
        self.direct = transport or httpx.AsyncHTTPTransport()
        self.http_agent = http_agent
        self.https_agent = https_agent

    def route(self, request: httpx.Request) -> httpx.AsyncBaseTransport:
        config = self.interceptor(_request_config(request, self.http_agent, self.https_agent))
        return config.agent_for_scheme(request.url.scheme) or self.direct

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self.route(request).handle_async_request(request)

    async def aclose(self) -> None:
        await self.direct.aclose()
