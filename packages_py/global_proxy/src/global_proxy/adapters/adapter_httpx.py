"""
Adapter for httpx transports.
"""
import logging
import httpx
from typing import Any, Union
from .base import BaseAdapter

logger = logging.getLogger(__name__)

Transport = Union[httpx.HTTPTransport, httpx.AsyncHTTPTransport]

class HttpxAdapter(BaseAdapter):
    """Builds httpx transports routed through a proxy.

    httpx uses one transport class for all three agent kinds; the proxy URL
    scheme decides between HTTP forwarding, CONNECT tunnelling and SOCKS.
    SOCKS proxies need the ``socksio`` package (``httpx[socks]``).
    """

    @property
    def name(self) -> str:
        return "httpx"

    def _create(self, proxy_url: str, async_client: bool, options: Any) -> Transport:
        if async_client:
            return httpx.AsyncHTTPTransport(proxy=proxy_url, **options)
        return httpx.HTTPTransport(proxy=proxy_url, **options)

    def create_http_agent(self, proxy_url: str, async_client: bool = False, **options: Any) -> Transport:
        logger.debug(f"Creating httpx HTTP proxy transport (async={async_client})")
        return self._create(proxy_url, async_client, options)

    def create_https_agent(self, proxy_url: str, async_client: bool = False, **options: Any) -> Transport:
        logger.debug(f"Creating httpx HTTPS proxy transport (async={async_client})")
        return self._create(proxy_url, async_client, options)

    def create_socks_agent(self, proxy_url: str, async_client: bool = False, **options: Any) -> Transport:
        logger.debug(f"Creating httpx SOCKS proxy transport (async={async_client})")
        return self._create(proxy_url, async_client, options)
