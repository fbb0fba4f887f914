class GlobalProxyError(Exception):
    """Base exception for global proxy errors."""
    pass

class AgentCreationError(GlobalProxyError):
    def __init__(self, proxy_url: str, cause: Exception):
        msg = f"Failed to create transport agents for proxy '{proxy_url}': {str(cause)}"
        super().__init__(msg)
        self.proxy_url = proxy_url
        self.cause = cause
