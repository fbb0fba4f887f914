"""
Abstract base adapter for transport agent construction.
"""
from abc import ABC, abstractmethod
from typing import Any

class BaseAdapter(ABC):
    """Abstract interface for building proxy transport agents.

    ``options`` carries transport settings (``verify``, ``cert``, ``http2``...)
    applied to every agent the adapter builds.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the adapter (e.g., 'httpx')."""
        pass

    @abstractmethod
    def create_http_agent(self, proxy_url: str, async_client: bool = False, **options: Any) -> Any:
        """Create an agent that sends plain HTTP traffic through an HTTP proxy."""
        pass

    @abstractmethod
    def create_https_agent(self, proxy_url: str, async_client: bool = False, **options: Any) -> Any:
        """Create an agent that tunnels HTTPS traffic through an HTTP proxy."""
        pass

    @abstractmethod
    def create_socks_agent(self, proxy_url: str, async_client: bool = False, **options: Any) -> Any:
        """Create an agent that sends any traffic through a SOCKS proxy."""
        pass

    def close_agent(self, agent: Any) -> None:
        """Release a sync agent."""
        close = getattr(agent, "close", None)
        if callable(close):
            close()

    async def aclose_agent(self, agent: Any) -> None:
        """Release an async agent."""
        aclose = getattr(agent, "aclose", None)
        if callable(aclose):
            await aclose()
