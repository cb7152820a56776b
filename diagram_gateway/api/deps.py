from fastapi import Request
from diagram_gateway.core.config import Settings
from diagram_gateway.providers.factory import Registry

def get_registry(request: Request) -> Registry:
    return request.app.state.providers

def get_settings(request: Request) -> Settings:
    return request.app.state.settings
