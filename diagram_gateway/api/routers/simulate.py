import logging
from fastapi import APIRouter
from diagram_gateway.schemas.generate import SimulateRequest, DiagramResponse
from diagram_gateway.services.simulation import simulate_diagram

router = APIRouter(prefix="/api", tags=["simulate"])
logger = logging.getLogger(__name__)

# offline stand-in for /api/generate, returns a canned diagram
@router.post("/simulate", response_model=DiagramResponse)
def simulate(req: SimulateRequest) -> DiagramResponse:
    logger.info("simulation request for: %s", req.text)
    return DiagramResponse(code=simulate_diagram(req.text))
