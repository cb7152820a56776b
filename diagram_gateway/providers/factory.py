from types import MappingProxyType
from typing import Any, Mapping, Optional

from diagram_gateway.core.config import Settings
from diagram_gateway.providers.base import Provider, ProviderName
from diagram_gateway.providers.deepseek import DeepSeekProvider
from diagram_gateway.providers.gemini import GeminiProvider

Registry = Mapping[ProviderName, Provider]


def build_registry(settings: Settings) -> Registry:
    providers = {
        ProviderName.DEEPSEEK: DeepSeekProvider(
            api_key=settings.deepseek_api_key,
            endpoint=settings.deepseek_url,
            model=settings.deepseek_model,
        ),
        ProviderName.GEMINI: GeminiProvider(
            api_key=settings.gemini_api_key,
            url_template=settings.gemini_url_template,
            model=settings.gemini_model,
            temperature=settings.gemini_temperature,
            top_p=settings.gemini_top_p,
            top_k=settings.gemini_top_k,
        ),
    }
    return MappingProxyType(providers)


def lookup(registry: Registry, name: Any) -> Optional[Provider]:
    if not isinstance(name, str):
        return None
    try:
        key = ProviderName(name)
    except ValueError:
        return None
    return registry.get(key)
