"""
Data models for proxy environment configuration.
"""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

class ProxyEnvConfig(BaseModel):
    """Proxy settings resolved from the process environment.

    Built once at startup by ``load_proxy_env_config`` (or passed explicitly
    to ``setup_global_proxy``) and never changed afterwards.
    """
    model_config = ConfigDict(frozen=True)

    http_proxy_url: Optional[str] = Field(default=None, description="Proxy URL for http:// targets")
    https_proxy_url: Optional[str] = Field(default=None, description="Proxy URL for https:// targets")
    bypass_entries: Tuple[str, ...] = Field(default=(), description="NO_PROXY entries in declaration order")

    @property
    def enabled(self) -> bool:
        return bool(self.http_proxy_url or self.https_proxy_url)
