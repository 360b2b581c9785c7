"""Tests for the narrative layer and its LLM client."""

import httpx
import pytest

from mind_profiler.defaults import empty_result
from mind_profiler.llm import LLMClient
from mind_profiler.narrative import MAX_SAMPLE_CHARS, LLMNarrativeGenerator, build_cognitive_prompt


PROFILE_JSON = """Here is the profile:
```json
{
  "intellectualApproach": "Systematic and skeptical.",
  "strengths": ["Rigor", "Clarity"],
  "weaknesses": ["Impatience"],
  "growthPathways": ["Read more fiction"],
  "potentialPitfalls": ["Overconfidence"],
  "supportingQuotations": ["Therefore we proceed."],
  "detailedAnalysis": "The writer builds arguments step by step."
}
```"""


class FakeClient(LLMClient):
    """LLM client that returns a canned response."""

    def __init__(self, response: str):
        super().__init__(provider="ollama")
        self.response = response
        self.prompts = []

    def generate(self, prompt, temperature=0.3, max_tokens=2000, timeout=None):
        self.prompts.append(prompt)
        return self.response


@pytest.fixture
def style():
    return empty_result().writing_style


class TestCognitivePrompt:
    """Test prompt rendering."""

    def test_includes_metrics(self, make_document, style):
        prompt = build_cognitive_prompt([make_document("Therefore we proceed.")], style)

        assert "Therefore we proceed." in prompt
        assert "Formality: 50% (percentile 50)" in prompt
        assert "Dialectical vs Didactic: 50%" in prompt

    def test_sample_is_truncated(self, make_document, style):
        prompt = build_cognitive_prompt([make_document("x" * (MAX_SAMPLE_CHARS + 500))], style)
        assert "x" * MAX_SAMPLE_CHARS in prompt
        assert "x" * (MAX_SAMPLE_CHARS + 1) not in prompt


class TestNarrativeGenerator:
    """Test narrative profile generation."""

    def test_parses_profile(self, make_document, style):
        client = FakeClient(PROFILE_JSON)
        profile = LLMNarrativeGenerator(client).generate([make_document("Therefore we proceed.")], style)

        assert profile.intellectual_approach == "Systematic and skeptical."
        assert profile.strengths == ("Rigor", "Clarity")
        assert len(client.prompts) == 1

    def test_empty_corpus(self, style):
        client = FakeClient(PROFILE_JSON)
        assert LLMNarrativeGenerator(client).generate([], style) is None
        assert client.prompts == []

    def test_unparseable_response(self, make_document, style):
        client = FakeClient("I cannot help with that.")
        assert LLMNarrativeGenerator(client).generate([make_document("Text.")], style) is None

    def test_schema_mismatch(self, make_document, style):
        client = FakeClient('{"strengths": 42}')
        assert LLMNarrativeGenerator(client).generate([make_document("Text.")], style) is None


class TestLLMClient:
    """Test the HTTP backends with a patched transport."""

    @pytest.fixture
    def client(self):
        return LLMClient(provider="ollama", model="test-model")

    def test_ollama_response(self, client, monkeypatch):
        calls = []

        def fake_post(url, **kwargs):
            calls.append((url, kwargs))
            return httpx.Response(200, json={"response": "  hello  "})

        monkeypatch.setattr(httpx, "post", fake_post)

        assert client.generate("prompt", timeout=1.0) == "hello"
        url, kwargs = calls[0]
        assert url.endswith("/api/generate")
        assert kwargs["json"]["model"] == "test-model"
        assert kwargs["timeout"] == 1.0

    def test_ollama_error_status(self, client, monkeypatch):
        monkeypatch.setattr(httpx, "post", lambda url, **kwargs: httpx.Response(500, text="boom"))
        assert client.generate("prompt") == ""

    def test_connection_error(self, client, monkeypatch):
        def refuse(url, **kwargs):
            raise httpx.ConnectError("connection refused")

        monkeypatch.setattr(httpx, "post", refuse)
        assert client.generate("prompt") == ""

    def test_hf_without_key_uses_ollama(self, monkeypatch):
        client = LLMClient(provider="huggingface", model="test-model")
        client.settings = client.settings.model_copy(update={"hf_api_key": ""})
        urls = []

        def fake_post(url, **kwargs):
            urls.append(url)
            return httpx.Response(200, json={"response": "local"})

        monkeypatch.setattr(httpx, "post", fake_post)

        assert client.generate("prompt") == "local"
        assert urls[0].endswith("/api/generate")

    def test_hf_chat_completion(self, monkeypatch):
        client = LLMClient(provider="huggingface", model="test-model")
        client.settings = client.settings.model_copy(update={"hf_api_key": "secret"})

        def fake_post(url, **kwargs):
            assert kwargs["headers"]["Authorization"] == "Bearer secret"
            return httpx.Response(200, json={"choices": [{"message": {"content": " remote "}}]})

        monkeypatch.setattr(httpx, "post", fake_post)
        assert client.generate("prompt") == "remote"

    def test_hf_retries_once_while_loading(self, monkeypatch):
        client = LLMClient(provider="huggingface", model="test-model")
        client.settings = client.settings.model_copy(update={"hf_api_key": "secret"})
        responses = [
            httpx.Response(503, text="loading"),
            httpx.Response(200, json={"choices": [{"message": {"content": "ready"}}]}),
        ]

        monkeypatch.setattr(httpx, "post", lambda url, **kwargs: responses.pop(0))
        monkeypatch.setattr("mind_profiler.llm.time.sleep", lambda seconds: None)

        assert client.generate("prompt") == "ready"
        assert responses == []

    def test_extract_json(self, client):
        assert client.extract_json('```json\n{"a": 1}\n```') == {"a": 1}
        assert client.extract_json('[1, 2]') == [1, 2]
        assert client.extract_json('Sure! {"a": {"b": 2}} Done.') == {"a": {"b": 2}}
        assert client.extract_json("no json here") is None
        assert client.extract_json("") is None
