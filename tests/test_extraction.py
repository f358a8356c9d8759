import asyncio
import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

from services.extraction import (
    LocalResumeExtractor,
    RemoteExtractionError,
    RemoteResumeExtractor,
    get_resume_extractor,
    parse_llm_reply,
)
from services.llm import LLMConfig, LLMFactory, LLMMessage, LLMProvider
from services.llm.claude_provider import ClaudeProvider
from services.llm.openai_provider import OpenAIProvider
from services.parser import ExtractionMethod

RESUME_TEXT = "Jane Doe\njane@example.com\n"


class FakeProvider(LLMProvider):
    def __init__(self, reply: str = "{}", error: Exception = None, delay: float = 0):
        super().__init__("test-key", LLMConfig(model="fake", timeout=5))
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = []

    async def generate(self, messages):
        text, _ = await self.generate_with_usage(messages)
        return text

    async def generate_with_usage(self, messages):
        self.calls.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.reply, {"input_tokens": 7, "output_tokens": 3, "total_tokens": 10}


class ParseLLMReplyTests(unittest.TestCase):
    def test_plain_json(self):
        self.assertEqual(parse_llm_reply('{"name": "Jane"}'), {"name": "Jane"})

    def test_code_fence(self):
        reply = '```json\n{"name": "Jane"}\n```'
        self.assertEqual(parse_llm_reply(reply), {"name": "Jane"})

    def test_surrounding_chatter(self):
        reply = 'Here is the data: {"name": "Jane"} Let me know!'
        self.assertEqual(parse_llm_reply(reply), {"name": "Jane"})

    def test_rejects_non_objects(self):
        for reply in ("not json", "[1, 2]", "", '{"name": }'):
            with self.assertRaises(RemoteExtractionError):
                parse_llm_reply(reply)


class RemoteResumeExtractorTests(unittest.IsolatedAsyncioTestCase):
    async def test_reply_becomes_record(self):
        provider = FakeProvider(
            '{"name": " Jane Doe ", "email": "jane@example.com", '
            '"skills": ["Python"], "phone": 5551234567, "hobbies": "chess"}'
        )
        result = await RemoteResumeExtractor(provider).extract(RESUME_TEXT)

        self.assertEqual(result.method, ExtractionMethod.REMOTE)
        self.assertEqual(result.record.name, "Jane Doe")
        self.assertEqual(result.record.email, "jane@example.com")
        self.assertEqual(result.record.skills, "")
        self.assertEqual(result.record.phone, "")
        self.assertEqual(result.confidence["skills"], 0.0)
        self.assertGreater(result.confidence["email"], 0.8)

    async def test_prompt_carries_resume_text(self):
        provider = FakeProvider('{"name": "Jane Doe"}')
        await RemoteResumeExtractor(provider).extract(RESUME_TEXT)

        messages = provider.calls[0]
        self.assertEqual([m.role for m in messages], ["system", "user"])
        self.assertIn("jane@example.com", messages[1].content)
        self.assertIn("linkedin", messages[0].content)

    async def test_invalid_reply_falls_back_to_local(self):
        result = await RemoteResumeExtractor(FakeProvider("I cannot help with that")).extract(RESUME_TEXT)
        self.assertEqual(result.method, ExtractionMethod.LOCAL)
        self.assertEqual(result.record.name, "Jane Doe")

    async def test_provider_error_falls_back_to_local(self):
        provider = FakeProvider(error=ConnectionError("network down"))
        result = await RemoteResumeExtractor(provider).extract(RESUME_TEXT)
        self.assertEqual(result.method, ExtractionMethod.LOCAL)
        self.assertEqual(result.record.email, "jane@example.com")

    async def test_timeout_falls_back_to_local(self):
        provider = FakeProvider('{"name": "Remote Name"}', delay=1)
        result = await RemoteResumeExtractor(provider, timeout=0.01).extract(RESUME_TEXT)
        self.assertEqual(result.method, ExtractionMethod.LOCAL)
        self.assertEqual(result.record.name, "Jane Doe")

    async def test_extract_remote_does_not_fall_back(self):
        extractor = RemoteResumeExtractor(FakeProvider("[]"))
        with self.assertRaises(RemoteExtractionError):
            await extractor.extract_remote(RESUME_TEXT)

    async def test_non_string_input(self):
        with self.assertRaises(TypeError):
            await RemoteResumeExtractor(FakeProvider()).extract(None)

    async def test_local_extractor(self):
        result = await LocalResumeExtractor().extract(RESUME_TEXT)
        self.assertEqual(result.method, ExtractionMethod.LOCAL)
        self.assertEqual(result.record.name, "Jane Doe")


class ExtractorSelectionTests(unittest.TestCase):
    def test_local_mode(self):
        self.assertIsInstance(get_resume_extractor("local"), LocalResumeExtractor)

    @patch("services.extraction.LLMFactory.create")
    def test_remote_without_key_uses_local(self, mock_create):
        mock_create.side_effect = ValueError("API key not provided for openai")
        self.assertIsInstance(get_resume_extractor("remote"), LocalResumeExtractor)

    @patch("services.extraction.LLMFactory.create")
    def test_remote_mode(self, mock_create):
        provider = FakeProvider()
        mock_create.return_value = provider
        extractor = get_resume_extractor("remote")
        self.assertIsInstance(extractor, RemoteResumeExtractor)
        self.assertIs(extractor.provider, provider)
        self.assertEqual(extractor.timeout, 5)


class LLMFactoryTests(unittest.TestCase):
    def test_unknown_provider(self):
        with self.assertRaises(ValueError):
            LLMFactory.create("gemini", api_key="key")

    def test_blank_key(self):
        with self.assertRaises(ValueError):
            LLMFactory.create("openai", api_key="  ")

    def test_creates_configured_provider(self):
        config = LLMConfig(model="gpt-test", timeout=12)
        provider = LLMFactory.create("openai", api_key="sk-test", config=config)
        self.assertIsInstance(provider, OpenAIProvider)
        self.assertEqual(provider.config.timeout, 12)
        self.assertIsInstance(LLMFactory.create("claude", api_key="key", config=config), ClaudeProvider)

    def test_registered_provider(self):
        class LocalModelProvider(FakeProvider):
            def __init__(self, api_key, config):
                super().__init__()
                self.api_key = api_key
                self.config = config

        config = LLMConfig(model="local-test")
        with patch.dict(LLMFactory._providers):
            LLMFactory.register("local-model", LocalModelProvider)
            provider = LLMFactory.create("local-model", api_key="key", config=config)

        self.assertIsInstance(provider, LocalModelProvider)
        self.assertIs(provider.config, config)
        with self.assertRaises(ValueError):
            LLMFactory.create("local-model", api_key="key", config=config)


class ProviderAdapterTests(unittest.IsolatedAsyncioTestCase):
    messages = [
        LLMMessage(role="system", content="Extract fields"),
        LLMMessage(role="user", content="Jane Doe"),
    ]

    async def test_openai_reply_and_usage(self):
        provider = OpenAIProvider("sk-test", LLMConfig(model="gpt-test"))
        response = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content='{"name": "Jane"}'))],
            usage=SimpleNamespace(prompt_tokens=11, completion_tokens=4, total_tokens=15),
        )
        provider._client = MagicMock()
        provider._client.chat.completions.create = AsyncMock(return_value=response)

        text, usage = await provider.generate_with_usage(self.messages)

        self.assertEqual(text, '{"name": "Jane"}')
        self.assertEqual(usage["total_tokens"], 15)
        kwargs = provider._client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-test")
        self.assertEqual(kwargs["messages"][0], {"role": "system", "content": "Extract fields"})

    async def test_claude_sends_system_separately(self):
        provider = ClaudeProvider("key", LLMConfig(model="claude-test"))
        response = SimpleNamespace(
            content=[SimpleNamespace(type="text", text='{"name": "Jane"}')],
            usage=SimpleNamespace(input_tokens=9, output_tokens=6),
        )
        provider._client = MagicMock()
        provider._client.messages.create = AsyncMock(return_value=response)

        text = await provider.generate(self.messages)

        self.assertEqual(text, '{"name": "Jane"}')
        kwargs = provider._client.messages.create.call_args.kwargs
        self.assertEqual(kwargs["system"], "Extract fields")
        self.assertEqual(kwargs["messages"], [{"role": "user", "content": "Jane Doe"}])


if __name__ == "__main__":
    unittest.main()
