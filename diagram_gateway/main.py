# diagram_gateway/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from diagram_gateway.core import config
from diagram_gateway.core.config import Settings, load_settings
from diagram_gateway.core.logging import configure_logging
from diagram_gateway.api.routers.health import router as health_router
from diagram_gateway.api.routers.providers import router as providers_router
from diagram_gateway.api.routers.generate import router as generate_router
from diagram_gateway.api.routers.simulate import router as simulate_router
from diagram_gateway.providers.factory import build_registry

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(title="Diagram Gateway", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # providers are built once and only read afterwards; routers reach them via Depends(get_registry)
    settings = settings or load_settings()
    app.state.settings = settings
    app.state.providers = build_registry(settings)

    # Routers
    app.include_router(health_router)
    app.include_router(providers_router)
    app.include_router(generate_router)
    app.include_router(simulate_router)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    configure_logging(config.LOG_LEVEL)
    logger.info("Server running on port %s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    run()
