"""Tests for HTTP backend"""

import asyncio
import json
from unittest.mock import patch

import httpx
import pytest

from corenlp_client.core.config import SERIALIZER_CLASS
from corenlp_client.core.exceptions import (
    ConfigurationError, EmptyInputError, FramingError, MissingDocumentError,
    TransportError
)
from corenlp_client.protocol.document import Document
from corenlp_client.services.http_client import HttpClient


def _properties(request: httpx.Request) -> dict:
    return json.loads(request.url.params["properties"])


@pytest.mark.unit
class TestHttpClientConfiguration:
    """Test construction and request building"""

    def test_default_url(self, test_settings):
        client = HttpClient(settings=test_settings)
        assert client.url == "http://corenlp.test:9000/"

    @pytest.mark.parametrize("url", [
        "http://localhost:9000",
        "http://localhost:9000/",
    ])
    def test_single_trailing_slash(self, url):
        client = HttpClient(["tokenize"], url=url)

        assert client.url == "http://localhost:9000/"
        assert client.build_url().startswith("http://localhost:9000/?properties=")
        assert "//?" not in client.build_url()

    def test_properties_with_annotators(self):
        client = HttpClient(["tokenize", "ssplit", "pos"], url="http://localhost:9000")

        assert client.build_properties() == (
            '{"annotators":"tokenize,ssplit,pos","outputFormat":"serialized",'
            f'"serializer":"{SERIALIZER_CLASS}"}}'
        )

    @pytest.mark.parametrize("annotators", [None, []])
    def test_properties_without_annotators(self, annotators):
        client = HttpClient(annotators, url="http://localhost:9000")

        assert json.loads(client.build_properties()) == {
            "outputFormat": "serialized",
            "serializer": SERIALIZER_CLASS,
        }

    def test_properties_are_query_encoded(self):
        client = HttpClient(["tokenize"], url="http://localhost:9000")
        query = client.build_url().split("?", 1)[1]

        assert query.startswith("properties=%7B%22annotators%22%3A%22tokenize%22")
        assert "{" not in query and '"' not in query

    def test_blank_annotator_rejected(self):
        with pytest.raises(ConfigurationError):
            HttpClient(["tokenize", ""], url="http://localhost:9000")


@pytest.mark.unit
class TestHttpClientRunText:
    """Test the request/response exchange"""

    @pytest.mark.asyncio
    async def test_success(self, mock_http_client, recorded_requests, framed_document, sample_document):
        http = mock_http_client(lambda request: httpx.Response(200, content=framed_document))
        client = HttpClient(["tokenize", "ssplit"], url="http://localhost:9000", http_client=http)

        doc = Document()
        await client.run_text("Hello world.", doc)

        assert doc == sample_document
        request = recorded_requests[0]
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "text/plain"
        assert request.content == b"Hello world."
        assert str(request.url).startswith("http://localhost:9000/?properties=")
        assert _properties(request) == {
            "annotators": "tokenize,ssplit",
            "outputFormat": "serialized",
            "serializer": SERIALIZER_CLASS,
        }

    @pytest.mark.asyncio
    async def test_annotators_omitted(self, mock_http_client, recorded_requests, framed_document):
        http = mock_http_client(lambda request: httpx.Response(200, content=framed_document))
        client = HttpClient(url="http://localhost:9000", http_client=http)

        await client.run_text(b"Hello world.", Document())

        assert "annotators" not in _properties(recorded_requests[0])

    @pytest.mark.asyncio
    async def test_status_404(self, mock_http_client):
        http = mock_http_client(lambda request: httpx.Response(404, content=b"not here"))
        client = HttpClient(["tokenize"], url="http://localhost:9000", http_client=http)

        with pytest.raises(TransportError) as exc_info:
            await client.run_text(b"Hello", Document())

        err = exc_info.value
        assert err.status_code == 404
        assert err.url == "http://localhost:9000/"
        assert "404 Not Found" in err.message

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [199, 300, 302, 500, 503])
    async def test_non_2xx(self, mock_http_client, status):
        http = mock_http_client(lambda request: httpx.Response(status))
        client = HttpClient(["tokenize"], url="http://localhost:9000", http_client=http)

        with pytest.raises(TransportError) as exc_info:
            await client.run_text(b"Hello", Document())
        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_connection_error(self, mock_http_client):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpClient(["tokenize"], url="http://localhost:9000", http_client=mock_http_client(refuse))

        with pytest.raises(TransportError) as exc_info:
            await client.run_text(b"Hello", Document())

        err = exc_info.value
        assert err.status_code is None
        assert err.url == "http://localhost:9000/"
        assert "connection refused" in err.message
        assert isinstance(err.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout(self, mock_http_client):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = HttpClient(["tokenize"], url="http://localhost:9000", http_client=mock_http_client(slow))

        with pytest.raises(TransportError) as exc_info:
            await client.run_text(b"Hello", Document())
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_malformed_body(self, mock_http_client):
        http = mock_http_client(lambda request: httpx.Response(200, content=b"\x05ab"))
        client = HttpClient(["tokenize"], url="http://localhost:9000", http_client=http)

        with pytest.raises(FramingError):
            await client.run_text(b"Hello", Document())

    @pytest.mark.asyncio
    async def test_cancellation(self, mock_http_client):
        async def hang(request):
            await asyncio.sleep(30)
            return httpx.Response(200)

        client = HttpClient(["tokenize"], url="http://localhost:9000", http_client=mock_http_client(hang))
        task = asyncio.ensure_future(client.run_text(b"Hello", Document()))
        await asyncio.sleep(0.05)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await asyncio.wait_for(task, timeout=5)

    @pytest.mark.asyncio
    async def test_own_client_per_call(self, framed_document, sample_document):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=framed_document))
        real_async_client = httpx.AsyncClient

        def make_client(**kwargs):
            assert kwargs["timeout"] == 7
            return real_async_client(transport=transport, **kwargs)

        client = HttpClient(["tokenize"], url="http://localhost:9000", timeout=7)
        with patch("corenlp_client.services.http_client.httpx.AsyncClient", side_effect=make_client):
            doc = Document()
            await client.run_text(b"Hello world.", doc)

        assert doc == sample_document


@pytest.mark.unit
class TestHttpClientFastFail:
    """Test argument checks that run before any request"""

    @pytest.mark.asyncio
    async def test_empty_input(self, mock_http_client, recorded_requests):
        client = HttpClient(["tokenize"], http_client=mock_http_client(lambda r: httpx.Response(200)))

        with pytest.raises(EmptyInputError):
            await client.run_text(b"", Document())
        assert recorded_requests == []

    @pytest.mark.asyncio
    async def test_missing_document(self, mock_http_client, recorded_requests):
        client = HttpClient(["tokenize"], http_client=mock_http_client(lambda r: httpx.Response(200)))

        with pytest.raises(MissingDocumentError):
            await client.run_text(b"Hello", None)
        assert recorded_requests == []

    @pytest.mark.asyncio
    async def test_run_reads_file(self, tmp_path, mock_http_client, recorded_requests, framed_document):
        path = tmp_path / "input.txt"
        path.write_text("Hello world.", encoding="utf-8")
        http = mock_http_client(lambda request: httpx.Response(200, content=framed_document))
        client = HttpClient(["tokenize"], http_client=http)

        doc = Document()
        await client.run(path, doc)

        assert recorded_requests[0].content == b"Hello world."
        assert len(doc.sentence) == 1

    @pytest.mark.asyncio
    async def test_run_missing_file(self, tmp_path, mock_http_client, recorded_requests):
        client = HttpClient(["tokenize"], http_client=mock_http_client(lambda r: httpx.Response(200)))

        with pytest.raises(FileNotFoundError):
            await client.run(tmp_path / "missing.txt", Document())
        assert recorded_requests == []
