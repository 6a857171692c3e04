import logging

from openai import OpenAI, OpenAIError

from app.agents.errors import UpstreamServiceError
from app.agents.llm.base import LLMClient
from app.agents.schemas import SamplingConfig

logger = logging.getLogger(__name__)

class OpenAICompatibleClient(LLMClient):
    """Chat completions against OpenAI or any OpenAI-compatible endpoint (Groq, ...)."""

    provider = "openai"

    def __init__(self, *, api_key: str, base_url: str, model: str,
                 timeout: float = 120, send_top_k: bool = False):
        super().__init__(model=model)
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)
        self.send_top_k = send_top_k

    def generate_text(self, *, system: str, user: str, config: SamplingConfig) -> str:
        kwargs = {}
        if config.json_output:
            kwargs["response_format"] = {"type": "json_object"}
        # top_k is not part of the OpenAI schema; only some compatible servers accept it
        if self.send_top_k:
            kwargs["extra_body"] = {"top_k": config.top_k}

        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=config.temperature,
                top_p=config.top_p,
                max_tokens=config.max_output_tokens,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                **kwargs,
            )
        except OpenAIError as e:
            logger.error("OpenAI-compatible request to %s failed: %s", self.model, e)
            raise UpstreamServiceError() from e

        if not resp.choices:
            return ""
        return resp.choices[0].message.content or ""
