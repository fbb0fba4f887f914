"""
Factory for proxy transport agents, cached per proxy URL.
"""
import logging
import threading
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit
from .adapters import get_adapter, BaseAdapter
from .config import mask_proxy_url
from .exceptions import AgentCreationError
from .models import AgentPair

logger = logging.getLogger(__name__)

def proxy_scheme(proxy_url: str) -> str:
    """Scheme of a proxy URL, ``http`` when it cannot be determined."""
    try:
        scheme = urlsplit(proxy_url).scheme
    except ValueError:
        return "http"
    return scheme.lower() or "http"

class AgentFactory:
    """Creates and caches one AgentPair per distinct proxy URL.

    Agents live as long as the factory. Proxy URLs come from the environment,
    so the cache holds only a handful of entries. ``agent_options`` are passed
    to the adapter for every agent (e.g. ``verify``, ``cert``, ``http2``).
    """

    def __init__(
        self,
        adapter: str = "httpx",
        async_client: bool = False,
        agent_options: Optional[Dict[str, Any]] = None
    ):
        self.adapter: BaseAdapter = get_adapter(adapter)
        self.async_client = async_client
        self.agent_options: Dict[str, Any] = dict(agent_options or {})
        self._cache: Dict[str, AgentPair] = {}
        self._lock = threading.Lock()

        logger.debug(f"AgentFactory initialized with adapter '{adapter}' (async={async_client})")

    def get_agents(self, proxy_url: str) -> AgentPair:
        """Get the agents for ``proxy_url``, creating them on first use."""
        cached = self._cache.get(proxy_url)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._cache.get(proxy_url)
            if cached is not None:
                return cached
            agents = self._create_agents(proxy_url)
            self._cache[proxy_url] = agents
            return agents

    def _create_agents(self, proxy_url: str) -> AgentPair:
        scheme = proxy_scheme(proxy_url)
        masked = mask_proxy_url(proxy_url)
        options = self.agent_options
        try:
            if scheme.startswith("socks"):
                logger.debug(f"Creating SOCKS agent for {masked}")
                agent = self.adapter.create_socks_agent(proxy_url, async_client=self.async_client, **options)
                return AgentPair(plain_agent=agent, secure_agent=agent)

            logger.debug(f"Creating HTTP/HTTPS agents for {masked}")
            return AgentPair(
                plain_agent=self.adapter.create_http_agent(proxy_url, async_client=self.async_client, **options),
                secure_agent=self.adapter.create_https_agent(proxy_url, async_client=self.async_client, **options),
            )
        except Exception as e:
            raise AgentCreationError(masked, e) from e

    def __contains__(self, proxy_url: str) -> bool:
        return proxy_url in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def _drain(self) -> List[Any]:
        """Empty the cache and return each cached agent once."""
        with self._lock:
            pairs = list(self._cache.values())
            self._cache.clear()
        agents: List[Any] = []
        for pair in pairs:
            agents.append(pair.plain_agent)
            if pair.secure_agent is not pair.plain_agent:
                agents.append(pair.secure_agent)
        return agents

    def clear(self) -> None:
        """Close cached sync agents and empty the cache."""
        for agent in self._drain():
            self.adapter.close_agent(agent)

    async def aclear(self) -> None:
        """Close cached async agents and empty the cache."""
        for agent in self._drain():
            await self.adapter.aclose_agent(agent)
