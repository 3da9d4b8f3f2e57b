# craftmargin/llm/openai_chat.py
"""OpenAI adapter (tier 3)."""

from .deepseek import DeepSeekAdapter


class OpenAIAdapter(DeepSeekAdapter):
    """
    Last-resort provider.

    Same chat-completions wire format as DeepSeek; only the endpoint,
    model and credential differ.
    """

    provider_id = "openai"
    endpoint = "https://api.openai.com/v1/chat/completions"
    model = "gpt-4-turbo"
    credential_env = "OPENAI_API_KEY"
