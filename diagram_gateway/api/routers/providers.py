from fastapi import APIRouter, Depends
from diagram_gateway.api.deps import get_registry
from diagram_gateway.providers.factory import Registry

router = APIRouter(prefix="/api", tags=["providers"])

@router.get("/providers")
def list_providers(registry: Registry = Depends(get_registry)) -> dict:
    return {"providers": [name.value for name in registry]}
