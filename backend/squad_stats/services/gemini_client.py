# Client for the Google Generative Language API (Gemini)
import httpx
import logging
from squad_stats.core.config import settings
from squad_stats.core.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

SERVICE_NAME = "Gemini"


class GeminiClient:
    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = settings.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or settings.GEMINI_MODEL
        self.base_url = base_url or settings.GEMINI_BASE_URL
        self.timeout = timeout or settings.GEMINI_TIMEOUT_SECONDS
        # tests swap in httpx.MockTransport
        self.transport = transport

    async def generate(self, prompt: str) -> str:
        """Send a single-turn prompt and return the generated text."""
        if not self.api_key:
            raise UpstreamUnavailableError(SERVICE_NAME, "GEMINI_API_KEY is not set")

        logger.info(f"GEMINI API CALLED: generateContent ({self.model})")

        url = f"{self.base_url}/models/{self.model}:generateContent"
        body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                res = await client.post(
                    url, params={"key": self.api_key}, json=body
                )
                res.raise_for_status()
                data = res.json()
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(SERVICE_NAME, str(e)) from e

        return self._extract_text(data)

    @staticmethod
    def _extract_text(data: dict) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            reason = (data.get("promptFeedback") or {}).get("blockReason", "no candidates")
            raise UpstreamUnavailableError(SERVICE_NAME, f"empty response ({reason})")

        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        if not text:
            raise UpstreamUnavailableError(SERVICE_NAME, "response has no text")
        return text
