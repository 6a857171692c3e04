import logging

import httpx

from app.agents.errors import UpstreamServiceError
from app.agents.llm.base import LLMClient
from app.agents.schemas import SamplingConfig

logger = logging.getLogger(__name__)

class GeminiClient(LLMClient):
    """Google Generative Language REST API (models/{model}:generateContent)."""

    provider = "gemini"

    def __init__(self, *, api_key: str, base_url: str, model: str, timeout: float = 120,
                 transport: httpx.BaseTransport | None = None):
        super().__init__(model=model)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def build_payload(self, *, system: str, user: str, config: SamplingConfig) -> dict:
        generation_config = {
            "temperature": config.temperature,
            "topP": config.top_p,
            "topK": config.top_k,
            "maxOutputTokens": config.max_output_tokens,
        }
        if config.json_output:
            generation_config["responseMimeType"] = "application/json"

        return {
            "systemInstruction": {"parts": [{"text": system}]},
            # Single-turn: every request starts a fresh conversation
            "contents": [{"role": "user", "parts": [{"text": user}]}],
            "generationConfig": generation_config,
        }

    def generate_text(self, *, system: str, user: str, config: SamplingConfig) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = self.build_payload(system=system, user=user, config=config)
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(url, json=payload, headers=headers)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            logger.error("Gemini returned HTTP %s: %s", e.response.status_code, e.response.text)
            raise UpstreamServiceError() from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Gemini request failed: %s", e)
            raise UpstreamServiceError() from e

        if not isinstance(data, dict):
            logger.error("Gemini returned an unexpected envelope: %s", type(data).__name__)
            raise UpstreamServiceError()

        candidates = data.get("candidates") or []
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            logger.warning("Gemini returned no candidates: %s", data.get("promptFeedback"))
            return ""

        content = candidates[0].get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            return ""
        return "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))
