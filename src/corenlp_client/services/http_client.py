"""HTTP backend talking to a running CoreNLP server"""

import json
from typing import Any, Optional, Sequence
from urllib.parse import quote_plus

import httpx
from google.protobuf.message import Message

from ..core.config import SERIALIZER_CLASS, Settings
from ..core.exceptions import TransportError
from ..core.logger import get_logger
from ..core.types import UNSET, HttpClientConfig, TextLike
from ..core.validators import validate_run_input
from ..protocol.framing import decode_document
from .base_client import BaseClient

logger = get_logger(__name__)


class HttpClient(BaseClient):
    """Sends text to a CoreNLP server and decodes the serialized reply

    The server must already be running, e.g.
    ``java -cp "*" edu.stanford.nlp.pipeline.StanfordCoreNLPServer``.
    An ``httpx.AsyncClient`` may be passed in to share its connection pool
    between calls; its lifecycle stays with the caller. Without one, each
    call opens and closes its own client.

    ``timeout=None`` disables the request timeout; leaving it out takes
    ``CORENLP_HTTP_TIMEOUT_SECONDS``.

    See https://stanfordnlp.github.io/CoreNLP/corenlp-server.html
    """

    def __init__(
        self,
        annotators: Optional[Sequence[str]] = None,
        url: Optional[str] = None,
        timeout: Any = UNSET,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
        config: Optional[HttpClientConfig] = None
    ):
        self.config = config or HttpClientConfig.from_settings(
            annotators,
            settings=settings,
            url=UNSET if url is None else url,
            timeout=timeout,
        )
        self.http_client = http_client

    @property
    def url(self) -> str:
        return self.config.url

    def build_properties(self) -> str:
        """Build the JSON ``properties`` query value"""
        properties = {}
        if self.config.annotators:
            properties["annotators"] = ",".join(self.config.annotators)
        properties["outputFormat"] = "serialized"
        properties["serializer"] = SERIALIZER_CLASS
        return json.dumps(properties, separators=(",", ":"))

    def build_url(self) -> str:
        """Build the full request URL"""
        return f"{self.config.url}?properties={quote_plus(self.build_properties())}"

    async def run_text(self, text: TextLike, document: Message) -> None:
        data = validate_run_input(text, document)
        request_url = self.build_url()
        logger.debug("POST %s (%d bytes)", request_url, len(data))

        if self.http_client is not None:
            body = await self._post(self.http_client, request_url, data)
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                body = await self._post(client, request_url, data)

        decode_document(body, document)

    async def _post(self, client: httpx.AsyncClient, request_url: str, data: bytes) -> bytes:
        try:
            response = await client.post(
                request_url,
                content=data,
                headers={"Content-Type": "text/plain"},
            )
        except httpx.HTTPError as e:
            raise TransportError(self.config.url, str(e) or type(e).__name__) from e

        logger.debug("CoreNLP server answered %d", response.status_code)
        if not 200 <= response.status_code < 300:
            raise TransportError(
                self.config.url,
                f"HTTP status {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )
        return response.content
