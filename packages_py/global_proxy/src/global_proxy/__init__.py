"""
Global proxy package.

Routes outbound httpx traffic through the proxy named by HTTP_PROXY,
HTTPS_PROXY or ALL_PROXY, honoring NO_PROXY.
"""
from .types import ProxyEnvConfig
from .models import AgentPair, RequestConfig, InterceptResult
from .config import (
    get_env,
    resolve_proxy_url,
    resolve_bypass_list,
    load_proxy_env_config,
    mask_proxy_url
)
from .bypass import is_bypassed, parse_bypass_entry
from .factory import AgentFactory, proxy_scheme
from .interceptor import ProxyInterceptor, resolve_absolute_url
from .transport import ProxyRoutingTransport, AsyncProxyRoutingTransport
from .setup import GlobalProxy, setup_global_proxy
from .exceptions import GlobalProxyError, AgentCreationError
from .adapters import register_adapter, BaseAdapter

__version__ = "0.1.0"

__all__ = [
    "ProxyEnvConfig",
    "AgentPair",
    "RequestConfig",
    "InterceptResult",
    "get_env",
    "resolve_proxy_url",
    "resolve_bypass_list",
    "load_proxy_env_config",
    "mask_proxy_url",
    "is_bypassed",
    "parse_bypass_entry",
    "AgentFactory",
    "proxy_scheme",
    "ProxyInterceptor",
    "resolve_absolute_url",
    "ProxyRoutingTransport",
    "AsyncProxyRoutingTransport",
    "GlobalProxy",
    "setup_global_proxy",
    "GlobalProxyError",
    "AgentCreationError",
    "register_adapter",
    "BaseAdapter"
]
