"""Python client for Stanford CoreNLP

Runs CoreNLP either as a local command line process or through a CoreNLP
server and decodes the serialized reply into a protobuf ``Document``::

    client = create_client("http", BASIC_ANNOTATORS)
    doc = Document()
    await client.run_text("Hello world.", doc)
"""

from .annotators import (
    Annotator,
    BASIC_ANNOTATORS,
    NER_ANNOTATORS,
    RELATION_EXTRACTION_ANNOTATORS,
    SEMANTIC_ANNOTATORS,
    SYNTAX_ANNOTATORS,
    annotators_to_strings,
    strings_to_annotators,
    validate_annotators,
)
from .core.exceptions import (
    ConfigurationError,
    CoreNLPClientError,
    DecodeError,
    EmptyInputError,
    ExecutionError,
    FramingError,
    MissingDocumentError,
    TransportError,
)
from .protocol.document import Document, Sentence, Token
from .protocol.framing import decode_document
from .services import BaseClient, CmdClient, HttpClient, create_client

__version__ = "0.1.0"
