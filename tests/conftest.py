"""Test configuration and fixtures"""

import sys
from pathlib import Path
from typing import Callable, List

import httpx
import pytest

from corenlp_client.core.config import Settings
from corenlp_client.protocol.document import Document
from corenlp_client.protocol.framing import encode_delimited


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def test_settings(tmp_path):
    """Test settings"""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    return Settings(
        java_cmd=sys.executable,
        classpath="/opt/corenlp/*",
        server_url="http://corenlp.test:9000",
        http_timeout_seconds=5,
        temp_dir=work_dir,
    )


@pytest.fixture
def work_dir(test_settings) -> Path:
    """Parent of the per-call temporary directories"""
    return test_settings.temp_dir


@pytest.fixture
def sample_document():
    """Document as the engine returns it for "Hello world." """
    doc = Document(text="Hello world.")
    sentence = doc.sentence.add(
        tokenOffsetBegin=0,
        tokenOffsetEnd=3,
        sentenceIndex=0,
        characterOffsetBegin=0,
        characterOffsetEnd=12,
    )
    for word, pos, lemma, begin, end in [
        ("Hello", "UH", "hello", 0, 5),
        ("world", "NN", "world", 6, 11),
        (".", ".", ".", 11, 12),
    ]:
        sentence.token.add(
            word=word,
            originalText=word,
            pos=pos,
            lemma=lemma,
            ner="O",
            beginChar=begin,
            endChar=end,
        )
    return doc


@pytest.fixture
def framed_document(sample_document) -> bytes:
    """Length-prefixed serialized sample document"""
    return encode_delimited(sample_document.SerializeToString())


@pytest.fixture
def framed_document_file(tmp_path, framed_document) -> Path:
    """Framed sample document written to disk"""
    path = tmp_path / "response.ser"
    path.write_bytes(framed_document)
    return path


@pytest.fixture
def fake_engine() -> Path:
    """Script standing in for the CoreNLP command line driver"""
    return FIXTURES_DIR / "fake_corenlp.py"


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport"""
    return []


@pytest.fixture
def mock_http_client(recorded_requests) -> Callable[..., httpx.AsyncClient]:
    """Factory for an AsyncClient backed by a MockTransport

    The handler receives the request and returns a response (or raises).
    """
    def factory(handler) -> httpx.AsyncClient:
        def recording_handler(request: httpx.Request):
            recorded_requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))

    return factory
