import logging

import httpx

from app.agents.errors import UpstreamServiceError
from app.agents.llm.base import LLMClient
from app.agents.schemas import SamplingConfig

logger = logging.getLogger(__name__)

class OllamaClient(LLMClient):
    provider = "ollama"

    def __init__(self, base_url: str, model: str, timeout: float = 120,
                 transport: httpx.BaseTransport | None = None):
        super().__init__(model=model)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def generate_text(self, * , system: str, user: str, config: SamplingConfig) -> str:
        # Native chat endpoint; the OpenAI-compatible one ignores top_k
        url = f"{self.base_url}/api/chat"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "stream": False,
            "options": {
                "temperature": config.temperature,
                "top_p": config.top_p,
                "top_k": config.top_k,
                "num_predict": config.max_output_tokens,
            },
        }
        if config.json_output:
            payload["format"] = "json"

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(url, json=payload)
                r.raise_for_status()
                data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Ollama request to %s failed: %s", url, e)
            raise UpstreamServiceError() from e

        if not isinstance(data, dict):
            logger.error("Ollama returned an unexpected envelope: %s", type(data).__name__)
            raise UpstreamServiceError()

        message = data.get("message")
        if not isinstance(message, dict):
            return ""
        content = message.get("content")
        return content if isinstance(content, str) else ""
