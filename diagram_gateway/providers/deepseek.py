from dataclasses import dataclass
from typing import Any, Dict, Optional

from diagram_gateway.providers.base import Provider, ProviderName
from diagram_gateway.services.prompt import build_prompt


@dataclass(frozen=True)
class DeepSeekProvider(Provider):
    api_key: str
    endpoint: str
    model: str

    name = ProviderName.DEEPSEEK

    @property
    def url(self) -> str:
        return self.endpoint

    @property
    def authorization(self) -> Optional[str]:
        return f"Bearer {self.api_key}"

    def build_request(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": build_prompt(prompt)}],
        }

    # response -> choices[0] -> message -> content
    def extract_text(self, data: Any) -> Any:
        return data["choices"][0]["message"]["content"]
