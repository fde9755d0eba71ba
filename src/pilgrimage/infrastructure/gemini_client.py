import json
from typing import Any

import httpx

from pilgrimage.infrastructure.resilient_http import post_json


class GeminiNarrativeClient:
    BASE_URL = "https://generativelanguage.googleapis.com"
    DEFAULT_MODEL = "gemini-3-flash-preview"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = BASE_URL,
        timeout: float = 4.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self.client = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def _generate(self, prompt: str, generation_config: dict[str, Any]) -> str:
        payload = post_json(
            self.client,
            f"/v1beta/models/{self.model}:generateContent",
            payload={
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "generationConfig": generation_config,
            },
            headers={"x-goog-api-key": self._api_key, "Accept": "application/json"},
        )
        candidates = payload.get("candidates") or []
        for candidate in candidates:
            if not isinstance(candidate, dict):
                continue
            parts = (candidate.get("content") or {}).get("parts") or []
            text = "".join(str(part.get("text", "")) for part in parts if isinstance(part, dict)).strip()
            if text:
                return text
        raise ValueError("Generation response carried no text")

    def generate_text(self, prompt: str, *, temperature: float = 0.9, top_p: float = 0.95) -> str:
        return self._generate(prompt, {"temperature": temperature, "topP": top_p})

    def generate_json(self, prompt: str, *, schema: dict[str, Any]) -> dict[str, Any]:
        text = self._generate(
            prompt,
            {"responseMimeType": "application/json", "responseSchema": schema},
        )
        decoded = json.loads(text)
        if not isinstance(decoded, dict):
            raise ValueError("Generated JSON is not an object")
        return decoded

    def close(self) -> None:
        self.client.close()
