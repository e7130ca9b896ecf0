"""Base client interface for CoreNLP backends"""

from abc import ABC, abstractmethod
from pathlib import Path

from google.protobuf.message import Message

from ..core.types import PathLike, TextLike


class BaseClient(ABC):
    """Common interface of the command line and HTTP backends

    Callers hold a ``BaseClient`` and never depend on the concrete backend,
    so either one (or a test double) can be swapped in.
    """

    @abstractmethod
    async def run_text(self, text: TextLike, document: Message) -> None:
        """
        Annotate text and populate ``document`` in place

        Args:
            text: Raw text (str is encoded as UTF-8)
            document: Protobuf message to fill, usually ``Document()``

        Raises:
            EmptyInputError: If text is empty
            MissingDocumentError: If document is None
            DecodeError: If the engine response cannot be decoded
        """
        pass

    async def run(self, input_path: PathLike, document: Message) -> None:
        """
        Annotate the whole content of a file

        Raises:
            OSError: If the file cannot be read
        """
        data = Path(input_path).read_bytes()
        await self.run_text(data, document)
