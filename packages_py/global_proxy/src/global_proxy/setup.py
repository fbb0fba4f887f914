"""
Process-wide proxy setup.

``setup_global_proxy`` reads the proxy environment once and returns a
``GlobalProxy`` that builds httpx clients routed through the interceptor:

    >>> proxy = setup_global_proxy()
    >>> with proxy.create_sync_client() as client:
    ...     client.get("https://api.example.com")
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
import httpx
from .config import load_proxy_env_config, mask_proxy_url
from .factory import AgentFactory
from .interceptor import ProxyInterceptor
from .transport import AsyncProxyRoutingTransport, ProxyRoutingTransport
from .types import ProxyEnvConfig

logger = logging.getLogger(__name__)

# Client kwargs that configure the direct transport rather than the client.
_TRANSPORT_KWARGS = ("verify", "cert", "http1", "http2", "limits")

def _split_transport_kwargs(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    return {key: kwargs.pop(key) for key in _TRANSPORT_KWARGS if key in kwargs}

@dataclass
class GlobalProxy:
    """Active proxy configuration plus the interceptors bound to it."""
    config: ProxyEnvConfig
    interceptor: ProxyInterceptor
    async_interceptor: ProxyInterceptor

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def create_sync_client(
        self,
        http_agent: Optional[httpx.BaseTransport] = None,
        https_agent: Optional[httpx.BaseTransport] = None,
        **kwargs: Any
    ) -> httpx.Client:
        """Create an httpx.Client whose requests go through the interceptor.

        ``http_agent``/``https_agent`` pin the transport for that scheme and
        always win over the proxy agents.

        ``verify``, ``cert``, ``http1``, ``http2`` and ``limits`` configure the
        direct transport only. Proxied requests use the agents built from the
        ``agent_options`` given to ``setup_global_proxy``.
        """
        if not self.enabled and http_agent is None and https_agent is None:
            return httpx.Client(**kwargs)

        transport_kwargs = _split_transport_kwargs(kwargs)
        direct = kwargs.pop("transport", None) or httpx.HTTPTransport(**transport_kwargs)
        kwargs["trust_env"] = False
        kwargs["transport"] = ProxyRoutingTransport(
            self.interceptor, transport=direct, http_agent=http_agent, https_agent=https_agent
        )
        logger.debug("Creating proxy-routed httpx.Client")
        return httpx.Client(**kwargs)

    def create_async_client(
        self,
        http_agent: Optional[httpx.AsyncBaseTransport] = None,
        https_agent: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs: Any
    ) -> httpx.AsyncClient:
        """Create an httpx.AsyncClient whose requests go through the interceptor.

        Transport kwargs are handled as in ``create_sync_client``.
        """
        if not self.enabled and http_agent is None and https_agent is None:
            return httpx.AsyncClient(**kwargs)

        transport_kwargs = _split_transport_kwargs(kwargs)
        direct = kwargs.pop("transport", None) or httpx.AsyncHTTPTransport(**transport_kwargs)
        kwargs["trust_env"] = False
        kwargs["transport"] = AsyncProxyRoutingTransport(
            self.async_interceptor, transport=direct, http_agent=http_agent, https_agent=https_agent
        )
        logger.debug("Creating proxy-routed httpx.AsyncClient")
        return httpx.AsyncClient(**kwargs)

    def describe(self) -> Dict[str, Any]:
        """Configuration summary with credentials masked."""
        return {
            "enabled": self.enabled,
            "http_proxy_url": mask_proxy_url(self.config.http_proxy_url) or None,
            "https_proxy_url": mask_proxy_url(self.config.https_proxy_url) or None,
            "no_proxy": list(self.config.bypass_entries),
            "cached_proxy_urls": len(self.interceptor.factory) + len(self.async_interceptor.factory),
        }

    def close(self) -> None:
        """Close cached sync agents. Use ``aclose`` to release async agents too."""
        self.interceptor.factory.clear()

    async def aclose(self) -> None:
        """Close cached sync and async agents."""
        self.interceptor.factory.clear()
        await self.async_interceptor.factory.aclear()

def _log_active_config(config: ProxyEnvConfig) -> None:
    if not config.enabled:
        logger.info("No proxy environment variables detected; requests will connect directly")
        return

    message = (
        f"Proxy enabled: http={mask_proxy_url(config.http_proxy_url)} "
        f"https={mask_proxy_url(config.https_proxy_url)}"
    )
    if config.bypass_entries:
        message += f" no_proxy=[{', '.join(config.bypass_entries)}]"
    logger.info(message)

def setup_global_proxy(
    config: Optional[ProxyEnvConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
    adapter: str = "httpx",
    agent_options: Optional[Dict[str, Any]] = None
) -> GlobalProxy:
    """Resolve proxy settings once and build the interceptors.

    Call once at process startup and share the returned object. An explicit
    ``config`` skips reading the environment. ``agent_options`` (e.g.
    ``{"verify": "/etc/ssl/corp-ca.pem"}``) apply to every proxy agent.
    """
    proxy_config = config if config is not None else load_proxy_env_config(environ)

    sync_factory = AgentFactory(adapter=adapter, agent_options=agent_options)
    async_factory = AgentFactory(adapter=adapter, async_client=True, agent_options=agent_options)
    global_proxy = GlobalProxy(
        config=proxy_config,
        interceptor=ProxyInterceptor(proxy_config, sync_factory),
        async_interceptor=ProxyInterceptor(proxy_config, async_factory),
    )
    _log_active_config(proxy_config)
    return global_proxy
