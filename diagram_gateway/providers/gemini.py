from dataclasses import dataclass
from typing import Any, Dict

import httpx

from diagram_gateway.providers.base import Provider, ProviderName
from diagram_gateway.services.prompt import build_prompt


@dataclass(frozen=True)
class GeminiProvider(Provider):
    api_key: str
    url_template: str
    model: str
    temperature: float = 0.5
    top_p: float = 0.8
    top_k: int = 40

    name = ProviderName.GEMINI

    # Gemini authenticates with a `key` query parameter rather than a header
    @property
    def url(self) -> str:
        base = httpx.URL(self.url_template.format(model=self.model))
        return str(base.copy_merge_params({"key": self.api_key}))

    @property
    def headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def build_request(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": build_prompt(prompt)}]}],
            "safetySettings": {
                "category": "HARM_CATEGORY_DANGEROUS_CONTENT",
                "threshold": "BLOCK_ONLY_HIGH",
            },
            "generationConfig": {
                "temperature": self.temperature,
                "topP": self.top_p,
                "topK": self.top_k,
            },
        }

    # response -> candidates[0] -> content -> parts[0] -> text
    def extract_text(self, data: Any) -> Any:
        return data["candidates"][0]["content"]["parts"][0]["text"]
