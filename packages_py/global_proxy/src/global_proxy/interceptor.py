"""
Per-request proxy selection.
"""
import re
import logging
from typing import Optional
from urllib.parse import urljoin, urlsplit
from .bypass import is_bypassed
from .config import mask_proxy_url
from .factory import AgentFactory
from .models import InterceptResult, RequestConfig
from .types import ProxyEnvConfig

logger = logging.getLogger(__name__)

_ABSOLUTE_URL = re.compile(r"^(http|https)://", re.IGNORECASE)

def resolve_absolute_url(request_config: RequestConfig) -> str:
    """Build the absolute target URL of a request.

    Falls back to the raw URL (possibly relative or empty) when no base URL
    is available to resolve it against.
    """
    url = request_config.url
    if url and _ABSOLUTE_URL.match(url):
        return url
    if request_config.base_url and url:
        return urljoin(request_config.base_url, url)
    return url or ""

class ProxyInterceptor:
    """Decides, per request, which proxy agents (if any) to inject.

    Never raises: any failure while deciding leaves the request untouched.
    """

    def __init__(self, config: ProxyEnvConfig, factory: AgentFactory):
        self.config = config
        self.factory = factory

    def select_proxy_url(self, scheme: str) -> Optional[str]:
        """Proxy URL for a target scheme, falling back to the other protocol's proxy."""
        if scheme == "https":
            return self.config.https_proxy_url or self.config.http_proxy_url
        return self.config.http_proxy_url or self.config.https_proxy_url

    def intercept(self, request_config: RequestConfig) -> InterceptResult:
        """Run the interceptor and report what it did."""
        if not self.config.enabled:
            return InterceptResult("passthrough", request_config, reason="disabled")
        try:
            return self._intercept(request_config)
        except Exception as e:
            logger.debug(f"Proxy interception failed, sending request unmodified: {e}")
            return InterceptResult("passthrough", request_config, reason="error")

    def __call__(self, request_config: RequestConfig) -> RequestConfig:
        return self.intercept(request_config).config

    def _intercept(self, request_config: RequestConfig) -> InterceptResult:
        absolute_url = resolve_absolute_url(request_config)
        if not absolute_url:
            return InterceptResult("passthrough", request_config, reason="no_url")

        if is_bypassed(absolute_url, self.config.bypass_entries):
            # bypassed requests keep the client's own proxy setting
            logger.debug(f"Bypassing proxy for {absolute_url}")
            return InterceptResult("passthrough", request_config, reason="bypassed")

        target = urlsplit(absolute_url)
        if not target.scheme or not target.netloc:
            return InterceptResult("passthrough", request_config, reason="relative_url")

        scheme = target.scheme.lower()
        proxy_url = self.select_proxy_url(scheme)
        if not proxy_url:
            return InterceptResult("passthrough", request_config, reason="no_proxy_url")

        agents = self.factory.get_agents(proxy_url)

        modified = request_config.copy()
        modified.proxy = False
        if modified.http_agent is None:
            modified.http_agent = agents.plain_agent
        if modified.https_agent is None:
            modified.https_agent = agents.secure_agent

        logger.debug(f"Routing {scheme} request via {mask_proxy_url(proxy_url)}")
        return InterceptResult("proxied", modified, proxy_url=proxy_url, reason="proxied")
