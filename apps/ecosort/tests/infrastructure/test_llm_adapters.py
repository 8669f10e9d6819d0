"""LLM Adapter Tests (Gemini / GPT, mock SDK client)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from ecosort.domain.exceptions import ProviderUnavailableError
from ecosort.infrastructure.llm import GeminiClassifierAdapter, GPTClassifierAdapter
from ecosort.infrastructure.llm.gemini.classifier import extract_grounding_citations
from ecosort.infrastructure.llm.gpt.classifier import extract_url_citations


def gemini_response(text: str, chunks: list | None = None) -> SimpleNamespace:
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(
        text=text,
        candidates=[SimpleNamespace(grounding_metadata=metadata)],
    )


def web_chunk(uri: str | None, title: str | None) -> SimpleNamespace:
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))


class TestGeminiCitations:
    """extract_grounding_citations() 테스트."""

    def test_extracts_web_chunks(self):
        response = gemini_response(
            "{}",
            [web_chunk("https://a.example", "A"), SimpleNamespace(web=None)],
        )
        assert extract_grounding_citations(response) == [
            {"uri": "https://a.example", "title": "A"},
        ]

    def test_no_candidates(self):
        assert extract_grounding_citations(SimpleNamespace(candidates=None)) == []

    def test_no_metadata(self):
        response = SimpleNamespace(candidates=[SimpleNamespace(grounding_metadata=None)])
        assert extract_grounding_citations(response) == []


class TestGeminiClassifierAdapter:
    """GeminiClassifierAdapter 테스트."""

    @pytest.fixture
    def adapter(self):
        adapter = GeminiClassifierAdapter(model="gemini-3-flash-preview", api_key="test-key")
        adapter._client = MagicMock()
        return adapter

    @pytest.mark.anyio
    async def test_grounded_request(self, adapter):
        # Given
        generate = AsyncMock(
            return_value=gemini_response('{"ok": 1}', [web_chunk("https://a.example", "A")])
        )
        adapter._client.aio.models.generate_content = generate

        # When
        response = await adapter.generate("prompt", grounded=True)

        # Then
        assert response.text == '{"ok": 1}'
        assert response.citations == [{"uri": "https://a.example", "title": "A"}]
        config = generate.call_args.kwargs["config"]
        assert config["response_mime_type"] == "application/json"
        assert "bin_recommendation" in config["response_json_schema"]["properties"]
        assert len(config["tools"]) == 1
        assert generate.call_args.kwargs["contents"] == "prompt"

    @pytest.mark.anyio
    async def test_image_request_without_tools(self, adapter, png_image):
        generate = AsyncMock(return_value=gemini_response("{}"))
        adapter._client.aio.models.generate_content = generate

        response = await adapter.generate("prompt", image=png_image)

        assert response.citations == []
        config = generate.call_args.kwargs["config"]
        assert "tools" not in config
        contents = generate.call_args.kwargs["contents"]
        assert contents[-1] == "prompt"
        assert len(contents) == 2

    @pytest.mark.anyio
    async def test_sdk_error_wrapped(self, adapter):
        adapter._client.aio.models.generate_content = AsyncMock(
            side_effect=RuntimeError("503 UNAVAILABLE")
        )

        with pytest.raises(ProviderUnavailableError) as exc_info:
            await adapter.generate("prompt")
        assert "503" in exc_info.value.reason
        assert exc_info.value.message == "Failed to classify item."

    @pytest.mark.anyio
    async def test_aclose_closes_async_client(self, adapter):
        adapter._client.aio.aclose = AsyncMock()

        await adapter.aclose()

        adapter._client.aio.aclose.assert_awaited_once()


def url_citation(url: str | None, title: str | None) -> SimpleNamespace:
    return SimpleNamespace(type="url_citation", url=url, title=title)


class TestGPTCitations:
    """extract_url_citations() 테스트."""

    def test_extracts_message_annotations(self):
        response = SimpleNamespace(
            output=[
                SimpleNamespace(type="web_search_call"),
                SimpleNamespace(
                    type="message",
                    content=[
                        SimpleNamespace(
                            annotations=[
                                url_citation("https://b.example", "B"),
                                SimpleNamespace(type="file_citation"),
                            ]
                        )
                    ],
                ),
            ]
        )
        assert extract_url_citations(response) == [
            {"uri": "https://b.example", "title": "B"},
        ]

    def test_empty_output(self):
        assert extract_url_citations(SimpleNamespace(output=None)) == []


class TestGPTClassifierAdapter:
    """GPTClassifierAdapter 테스트."""

    @pytest.fixture
    def adapter(self):
        adapter = GPTClassifierAdapter(model="gpt-5.1", api_key="test-key")
        adapter._client = MagicMock()
        return adapter

    @pytest.mark.anyio
    async def test_image_request(self, adapter, png_image):
        # Given
        create = AsyncMock(return_value=SimpleNamespace(output_text="{}", output=[]))
        adapter._client.responses.create = create

        # When
        response = await adapter.generate("prompt", image=png_image)

        # Then
        assert response.text == "{}"
        kwargs = create.call_args.kwargs
        content = kwargs["input"][0]["content"]
        assert content[0] == {"type": "input_text", "text": "prompt"}
        assert content[1]["image_url"].startswith("data:image/png;base64,")
        assert kwargs["text"]["format"]["type"] == "json_schema"
        assert "tools" not in kwargs

    @pytest.mark.anyio
    async def test_grounded_request(self, adapter):
        create = AsyncMock(
            return_value=SimpleNamespace(
                output_text="{}",
                output=[
                    SimpleNamespace(
                        type="message",
                        content=[SimpleNamespace(annotations=[url_citation("https://c.example", None)])],
                    )
                ],
            )
        )
        adapter._client.responses.create = create

        response = await adapter.generate("prompt", grounded=True)

        assert create.call_args.kwargs["tools"] == [{"type": "web_search"}]
        assert response.citations == [{"uri": "https://c.example", "title": None}]

    @pytest.mark.anyio
    async def test_sdk_error_wrapped(self, adapter):
        adapter._client.responses.create = AsyncMock(side_effect=TimeoutError("timed out"))

        with pytest.raises(ProviderUnavailableError):
            await adapter.generate("prompt")

    @pytest.mark.anyio
    async def test_aclose_closes_http_client(self, adapter):
        adapter._client.close = AsyncMock()

        await adapter.aclose()

        adapter._client.close.assert_awaited_once()

    @pytest.mark.anyio
    async def test_aclose_releases_injected_httpx_client(self):
        adapter = GPTClassifierAdapter(model="gpt-5.1", api_key="test-key")
        http_client = adapter._http_client

        await adapter.aclose()

        assert http_client.is_closed
