from services.llm.base import LLMProvider, LLMMessage, LLMConfig


class OpenAIProvider(LLMProvider):
    """OpenAI chat-completions provider.

    Also serves OpenAI-compatible endpoints (Perplexity and friends) when
    ``config.base_url`` is set.
    """

    def __init__(self, api_key: str, config: LLMConfig):
        super().__init__(api_key, config)
        self._client = None

    @property
    def client(self):
        """Lazy initialization of OpenAI client."""
        if self._client is None:
            from openai import AsyncOpenAI
            kwargs = {"api_key": self.api_key, "timeout": self.config.timeout}
            if self.config.base_url:
                kwargs["base_url"] = self.config.base_url
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def generate(self, messages: list[LLMMessage]) -> str:
        """Generate a text response from OpenAI."""
        text, _ = await self.generate_with_usage(messages)
        return text

    async def generate_with_usage(self, messages: list[LLMMessage]) -> tuple[str, dict]:
        """Generate response and return usage info."""
        response = await self.client.chat.completions.create(
            model=self.config.model,
            messages=self._format_messages(messages),
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )
        text = response.choices[0].message.content or ""
        usage = {
            "input_tokens": response.usage.prompt_tokens if response.usage else 0,
            "output_tokens": response.usage.completion_tokens if response.usage else 0,
            "total_tokens": response.usage.total_tokens if response.usage else 0,
        }
        return text, usage
