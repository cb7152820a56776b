# tests/test_generation.py
import pytest

from diagram_gateway.providers.base import EmptyDiagramError, UnknownProviderError, UpstreamError
from diagram_gateway.services import generation


@pytest.mark.asyncio
async def test_unknown_provider_never_dispatches(registry, monkeypatch):
    async def fake_dispatch(*args, **kwargs):
        raise AssertionError("dispatch must not be called")
    monkeypatch.setattr(generation, "dispatch", fake_dispatch)
    with pytest.raises(UnknownProviderError):
        await generation.generate_diagram(text="hi", provider_name="nope", registry=registry)

@pytest.mark.asyncio
async def test_success_path_sanitizes(registry, monkeypatch):
    async def fake_dispatch(provider, prompt, *, timeout):
        assert prompt == "a queue"
        return {"choices": [{"message": {"content": "```mermaid\ngraph LR\nQ-->W\n```"}}]}
    monkeypatch.setattr(generation, "dispatch", fake_dispatch)
    code = await generation.generate_diagram(text="a queue", provider_name="deepseek", registry=registry)
    assert code == "graph LR\nQ-->W"

@pytest.mark.asyncio
async def test_empty_result_is_failure(registry, monkeypatch):
    async def fake_dispatch(provider, prompt, *, timeout):
        return {"candidates": [{"content": {"parts": [{"text": "   "}]}}]}
    monkeypatch.setattr(generation, "dispatch", fake_dispatch)
    with pytest.raises(EmptyDiagramError):
        await generation.generate_diagram(text="x", provider_name="gemini", registry=registry)

@pytest.mark.asyncio
async def test_upstream_error_propagates_and_is_logged(registry, monkeypatch, caplog_debug):
    async def fake_dispatch(provider, prompt, *, timeout):
        raise UpstreamError(503, "overloaded")
    monkeypatch.setattr(generation, "dispatch", fake_dispatch)
    with pytest.raises(UpstreamError) as exc:
        await generation.generate_diagram(text="x", provider_name="deepseek", registry=registry)
    assert exc.value.details == "overloaded"
    assert any("generation failed" in rec.getMessage() for rec in caplog_debug.records)
