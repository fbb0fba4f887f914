"""
Data models for agents and request interception.
"""
from dataclasses import dataclass, replace
from typing import Any, Literal, Optional

InterceptAction = Literal["proxied", "passthrough"]

@dataclass(frozen=True)
class AgentPair:
    """Transport agents for one proxy URL.

    ``plain_agent`` carries http:// traffic and ``secure_agent`` carries
    https:// traffic. For SOCKS proxies both fields hold the same object.
    """
    plain_agent: Any  # Union[httpx.BaseTransport, httpx.AsyncBaseTransport]
    secure_agent: Any

    def for_scheme(self, scheme: str) -> Any:
        return self.secure_agent if scheme == "https" else self.plain_agent

@dataclass
class RequestConfig:
    """Per-request configuration seen by the interceptor."""
    url: Optional[str] = None
    base_url: Optional[str] = None
    proxy: Optional[bool] = None
    http_agent: Any = None
    https_agent: Any = None

    def copy(self) -> "RequestConfig":
        return replace(self)

    def agent_for_scheme(self, scheme: str) -> Any:
        return self.https_agent if scheme == "https" else self.http_agent

@dataclass(frozen=True)
class InterceptResult:
    """Outcome of running the interceptor on one request."""
    action: InterceptAction
    config: RequestConfig
    proxy_url: Optional[str] = None
    reason: str = ""

    @property
    def modified(self) -> bool:
        return self.action == "proxied"
