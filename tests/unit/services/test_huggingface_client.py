"""
Unit Tests for HuggingFace Inference Client

Uses httpx.MockTransport; no network access.
"""

import json

import httpx
import pytest

from mindease.infrastructure.enrichment.huggingface_client import (
    HuggingFaceInferenceClient,
    parse_classification_payload,
)
from mindease.infrastructure.enrichment.port import (
    EnrichmentError,
    EnrichmentHTTPError,
    EnrichmentTimeoutError,
    MalformedEnrichmentPayloadError,
)

MODEL = "SamLowe/roberta-base-go_emotions"


def _client(handler) -> tuple[HuggingFaceInferenceClient, httpx.AsyncClient]:
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url="https://inference.test",
    )
    return HuggingFaceInferenceClient(api_token="hf_test", http_client=http_client), http_client


class TestParseClassificationPayload:
    """Tests for payload parsing."""

    def test_nested_payload_sorted_by_score(self) -> None:
        """Test that nested payloads are parsed and sorted."""
        scores = parse_classification_payload([[
            {"label": "joy", "score": 0.2},
            {"label": "sadness", "score": 0.7},
        ]])

        assert [s.label for s in scores] == ["sadness", "joy"]

    def test_flat_payload(self) -> None:
        """Test that flat payloads are parsed."""
        scores = parse_classification_payload([{"label": "positive", "score": 0.9}])

        assert scores[0].label == "positive"
        assert scores[0].score == pytest.approx(0.9)

    @pytest.mark.parametrize(
        "payload",
        [
            {"error": "Model is loading"},
            [],
            [[]],
            ["joy"],
            [{"label": "joy"}],
            [{"label": "joy", "score": True}],
            [{"label": "joy", "score": 1.5}],
        ],
    )
    def test_malformed_payloads(self, payload) -> None:
        """Test that malformed payloads raise the payload error."""
        with pytest.raises(MalformedEnrichmentPayloadError):
            parse_classification_payload(payload)


class TestHuggingFaceInferenceClient:
    """Tests for the HTTP client."""

    @pytest.mark.asyncio
    async def test_posts_inputs_to_model_route(self) -> None:
        """Test that text is posted to the model route with the token."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[[{"label": "joy", "score": 0.95}]])

        client, http_client = _client(handler)
        scores = await client.classify("Best day ever", MODEL)

        assert scores[0].label == "joy"
        assert seen[0].method == "POST"
        assert seen[0].url.path == f"/models/{MODEL}"
        assert json.loads(seen[0].content) == {"inputs": "Best day ever"}
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_non_success_status(self) -> None:
        """Test that an error status raises the HTTP error."""
        client, http_client = _client(lambda request: httpx.Response(503, json={"error": "loading"}))

        with pytest.raises(EnrichmentHTTPError) as exc_info:
            await client.classify("hello", MODEL)

        assert exc_info.value.status_code == 503
        assert exc_info.value.reason == "http_error"
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        """Test that an invalid JSON body raises the payload error."""
        client, http_client = _client(lambda request: httpx.Response(200, content=b"<html>"))

        with pytest.raises(MalformedEnrichmentPayloadError):
            await client.classify("hello", MODEL)
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        """Test that a transport timeout raises the timeout error."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        client, http_client = _client(handler)

        with pytest.raises(EnrichmentTimeoutError) as exc_info:
            await client.classify("hello", MODEL)

        assert exc_info.value.reason == "timeout"
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        """Test that a transport failure raises the HTTP error."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client, http_client = _client(handler)

        with pytest.raises(EnrichmentError) as exc_info:
            await client.classify("hello", MODEL)

        assert exc_info.value.reason == "enrichment_error"
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_leaves_injected_client_open(self) -> None:
        """Test that an injected client is not closed."""
        client, http_client = _client(lambda request: httpx.Response(200, json=[]))

        await client.aclose()

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_context_manager_closes_owned_client(self) -> None:
        """Test that the context manager closes its own client."""
        async with HuggingFaceInferenceClient(api_token="hf_test") as client:
            assert client.provider_name == "huggingface"

        assert client._client.is_closed
