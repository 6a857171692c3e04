from app.settings import settings
from app.agents.llm.base import LLMClient
from app.agents.llm.gemini import GeminiClient
from app.agents.llm.ollama import OllamaClient
from app.agents.llm.openai_compat import OpenAICompatibleClient

def get_llm_client() -> LLMClient:
    """Build a fresh, stateless client for the configured provider."""
    provider = settings.LLM_PROVIDER.lower()

    if provider == "openai":
        return OpenAICompatibleClient(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            model=settings.OPENAI_MODEL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            send_top_k=settings.OPENAI_SEND_TOP_K,
        )

    if provider == "ollama":
        return OllamaClient(
            base_url=settings.ollama_base_url,
            model=settings.ollama_model,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )

    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        base_url=settings.GEMINI_BASE_URL,
        model=settings.GEMINI_MODEL,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )
