# craftmargin/llm/deepseek.py
"""DeepSeek adapter (tier 1), OpenAI-compatible chat completions API."""

from typing import Any

from .base import DEFAULT_TEMPERATURE, ProviderAdapter


def chat_messages(prompt: str, system_prompt: str) -> list[dict[str, str]]:
    """System + user message list in chat-completions format."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": prompt},
    ]


class DeepSeekAdapter(ProviderAdapter):
    """Primary provider."""

    provider_id = "deepseek"
    endpoint = "https://api.deepseek.com/v1/chat/completions"
    model = "deepseek-chat"
    credential_env = "DEEPSEEK_API_KEY"

    def request_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

    def build_payload(self, prompt: str, system_prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": chat_messages(prompt, system_prompt),
            "temperature": DEFAULT_TEMPERATURE,
        }

    def extract_text(self, body: dict[str, Any]) -> str:
        return body["choices"][0]["message"]["content"]
