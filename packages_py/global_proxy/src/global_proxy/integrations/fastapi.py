from typing import Any, Dict

from fastapi import APIRouter

from ..setup import GlobalProxy

def create_health_router(global_proxy: GlobalProxy) -> APIRouter:
    """
    Create a router exposing the active proxy configuration.
    Proxy credentials are masked in the response.
    """
    router = APIRouter()

    @router.get("/healthz/global-proxy")
    async def global_proxy_health() -> Dict[str, Any]:
        return {"status": "ok", **global_proxy.describe()}

    return router
