## Base LLM Client Interface
import logging
from abc import ABC, abstractmethod

from app.agents.errors import EmptyResponseError
from app.agents.schemas import SamplingConfig

logger = logging.getLogger(__name__)

class LLMClient(ABC):
    provider = "base"

    def __init__(self, *, model: str):
        self.model = model

    @abstractmethod
    def generate_text(self, *, system: str, user: str, config: SamplingConfig) -> str:
        """
        Send one system instruction + user prompt and return the raw reply text.
        Implementations raise UpstreamServiceError when the service call fails.
        """
        raise NotImplementedError

    def generate(self, *, system: str, user: str, config: SamplingConfig) -> str:
        logger.info(
            "Requesting completion from %s model %s (temperature=%.3f)",
            self.provider, self.model, config.temperature,
        )
        text = self.generate_text(system=system, user=user, config=config)
        if not text or not text.strip():
            logger.error("%s model %s returned no text", self.provider, self.model)
            raise EmptyResponseError()
        return text
