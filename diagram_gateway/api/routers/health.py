from fastapi import APIRouter, Depends
from diagram_gateway.api.deps import get_registry
from diagram_gateway.providers.factory import Registry

router = APIRouter(tags=["meta"])

# liveness plus the providers this process was built with
@router.get("/health")
def health(registry: Registry = Depends(get_registry)) -> dict:
    return {"status": "ok", "providers": [name.value for name in registry]}
