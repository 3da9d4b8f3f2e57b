# craftmargin/llm/gemini.py
"""Gemini adapter (tier 2), generateContent REST API."""

from typing import Any

from .base import ProviderAdapter


class GeminiAdapter(ProviderAdapter):
    """
    Secondary provider.

    Gemini takes no separate system role here: the system prompt is
    prepended to the user text in a single part.
    """

    provider_id = "gemini"
    model = "gemini-1.5-flash"
    endpoint = (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-1.5-flash:generateContent"
    )
    credential_env = "GEMINI_API_KEY"

    def request_params(self) -> dict[str, str]:
        return {"key": self._api_key or ""}

    def build_payload(self, prompt: str, system_prompt: str) -> dict[str, Any]:
        return {
            "contents": [
                {"parts": [{"text": system_prompt + "\n\n" + prompt}]},
            ],
        }

    def extract_text(self, body: dict[str, Any]) -> str:
        return body["candidates"][0]["content"]["parts"][0]["text"]
