from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from diagram_gateway.schemas.generate import GenerateRequest, DiagramResponse, ErrorResponse
from diagram_gateway.api.deps import get_registry, get_settings
from diagram_gateway.core.config import Settings
from diagram_gateway.providers.base import ProviderError, UnknownProviderError
from diagram_gateway.providers.factory import Registry
from diagram_gateway.services.generation import generate_diagram

router = APIRouter(prefix="/api", tags=["generate"])

@router.post(
    "/generate",
    response_model=DiagramResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    req: GenerateRequest,
    registry: Registry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    try:
        code = await generate_diagram(
            text=req.text,
            provider_name=req.provider,
            registry=registry,
            timeout=settings.request_timeout,
        )
    except UnknownProviderError as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    except ProviderError as e:
        return JSONResponse(status_code=500, content={"error": e.message, "details": e.details})
    return DiagramResponse(code=code)
