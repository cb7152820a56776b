import logging
from typing import Any

from diagram_gateway.providers.base import ProviderError, UnknownProviderError
from diagram_gateway.providers.dispatcher import dispatch, extract, redact_url
from diagram_gateway.providers.factory import Registry, lookup
from diagram_gateway.services.sanitizer import sanitize

logger = logging.getLogger(__name__)


async def generate_diagram(
    *,
    text: str,
    provider_name: Any,
    registry: Registry,
    timeout: float = 60.0,
) -> str:
    """Resolve the provider, call it once, and return sanitized diagram source.

    Any failure after resolution is a ProviderError subclass; an unknown
    provider raises UnknownProviderError before anything goes on the wire.
    """
    logger.info("generate request: provider=%s, text length=%d", provider_name, len(text))
    provider = lookup(registry, provider_name)
    if provider is None:
        logger.error("invalid provider: %s", provider_name)
        raise UnknownProviderError(details=provider_name)

    raw: Any = None
    try:
        data = await dispatch(provider, text, timeout=timeout)
        raw = extract(provider, data)
        logger.debug("raw code: %r", raw)
        return sanitize(raw)
    except ProviderError as e:
        logger.error(
            "generation failed: %s",
            {
                "url": redact_url(provider.url),
                "request_body": provider.build_request(text),
                "error_class": type(e).__name__,
                "error": e.message,
                "error_details": e.details,
                "raw_code": raw,
            },
        )
        raise
