"""Text generation backends for narrative profiles.

Two providers share one request path: a local Ollama server and the
Hugging Face chat-completions router. Failures are logged and come back
as an empty string, so callers only ever see text or nothing.
"""

import json
import logging
import re
import time
from typing import Optional

import httpx

from .config import get_settings

logger = logging.getLogger(__name__)

HF_CHAT_URL = "https://router.huggingface.co/v1/chat/completions"

# Seconds to wait before retrying while a hosted model is loading
MODEL_LOADING_WAIT = 20

_CODE_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class LLMClient:
    """Prompt-in, text-out client for the configured provider.

    Usage:
        client = LLMClient()
        text = client.generate("Describe this writer.")
        profile = client.extract_json(text)
    """

    def __init__(self, provider: Optional[str] = None, model: Optional[str] = None):
        self.settings = get_settings()
        self.provider = provider or self.settings.llm_provider
        default_model = self.settings.hf_model if self.provider == "huggingface" else self.settings.ollama_model
        self.model = model or default_model

    @property
    def uses_hosted_api(self) -> bool:
        """Hugging Face is used only when selected and a key is configured."""
        return self.provider == "huggingface" and bool(self.settings.hf_api_key)

    def generate(
        self,
        prompt: str,
        temperature: float = 0.3,
        max_tokens: int = 2000,
        timeout: Optional[float] = None,
    ) -> str:
        """
        Generate a completion for ``prompt``.

        Returns:
            The completion text, or "" if the backend failed
        """
        if self.provider == "huggingface" and not self.uses_hosted_api:
            logger.warning("MP_HF_API_KEY is not set, using Ollama instead")

        url, headers, payload = self._build_request(prompt, temperature, max_tokens)
        timeout = self.settings.llm_timeout if timeout is None else timeout

        for attempt in range(2):
            try:
                response = httpx.post(url, headers=headers, json=payload, timeout=timeout)
            except (httpx.RequestError, httpx.TimeoutException) as e:
                logger.warning("Request to %s failed: %s", url, e)
                return ""

            if response.status_code == 503 and self.uses_hosted_api and attempt == 0:
                logger.info("Hosted model is loading, retrying in %ss", MODEL_LOADING_WAIT)
                time.sleep(MODEL_LOADING_WAIT)
                continue
            break

        if response.status_code != 200:
            logger.warning("Backend returned %s: %s", response.status_code, response.text[:200])
            return ""

        return self._read_completion(response.json())

    def _build_request(self, prompt: str, temperature: float, max_tokens: int) -> tuple[str, dict, dict]:
        if self.uses_hosted_api:
            return (
                HF_CHAT_URL,
                {"Authorization": f"Bearer {self.settings.hf_api_key}"},
                {
                    "model": self.model,
                    "messages": [{"role": "user", "content": prompt}],
                    "temperature": temperature,
                    "max_tokens": max_tokens,
                },
            )
        return (
            f"{self.settings.ollama_base_url}/api/generate",
            {},
            {
                "model": self.model,
                "prompt": prompt,
                "stream": False,
                "options": {"temperature": temperature, "num_predict": max_tokens},
            },
        )

    def _read_completion(self, body: dict) -> str:
        if self.uses_hosted_api:
            choices = body.get("choices") or [{}]
            return choices[0].get("message", {}).get("content", "").strip()
        return body.get("response", "").strip()

    def extract_json(self, response: str) -> list | dict | None:
        """Parse JSON from a completion, tolerating code fences and surrounding prose."""
        if not response:
            return None

        fenced = _CODE_FENCE.search(response)
        candidates = [fenced.group(1) if fenced else response]
        embedded = _JSON_OBJECT.search(response)
        if embedded:
            candidates.append(embedded.group(0))

        for candidate in candidates:
            try:
                return json.loads(candidate)
            except json.JSONDecodeError:
                continue
        return None

    @property
    def is_available(self) -> bool:
        """Whether the backend can be reached (hosted API: whether a key is set)."""
        if self.provider == "huggingface":
            return bool(self.settings.hf_api_key)
        try:
            return httpx.get(f"{self.settings.ollama_base_url}/api/tags", timeout=5.0).status_code == 200
        except (httpx.RequestError, httpx.TimeoutException):
            return False
