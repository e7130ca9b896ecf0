"""Custom exceptions for the CoreNLP client"""

from typing import Optional


class CoreNLPClientError(Exception):
    """Base exception for CoreNLP client errors"""
    pass


class ConfigurationError(CoreNLPClientError):
    """Raised when caller-supplied setup is invalid (detected before any I/O)"""

    def __init__(
        self,
        message: str,
        annotator: Optional[str] = None,
        index: Optional[int] = None
    ):
        self.message = message
        self.annotator = annotator
        self.index = index
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.annotator is not None:
            return f"annotator error [{self.annotator}]: {self.message}"
        return f"configuration error: {self.message}"


class EmptyInputError(ConfigurationError):
    """Raised when the input text is empty"""

    def __init__(self):
        super().__init__("input text is empty")


class MissingDocumentError(ConfigurationError):
    """Raised when no output document is given"""

    def __init__(self):
        super().__init__("output document cannot be None")


class TransportError(CoreNLPClientError):
    """Raised when the CoreNLP server cannot be reached or rejects a request"""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        self.url = url
        self.message = message
        self.status_code = status_code
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"server error [{self.url}] (status {self.status_code}): {self.message}"
        return f"server error [{self.url}]: {self.message}"


class ExecutionError(CoreNLPClientError):
    """Raised when the CoreNLP process cannot start or exits non-zero"""

    def __init__(
        self,
        command: str,
        message: str,
        stderr: str = "",
        returncode: Optional[int] = None
    ):
        self.command = command
        self.message = message
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.stderr:
            return f"command error [{self.command}]: {self.message}\nstderr: {self.stderr}"
        return f"command error [{self.command}]: {self.message}"


class DecodeError(CoreNLPClientError):
    """Raised when a response cannot be decoded into a document"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"parse error: {self.message}: {self.__cause__}"
        return f"parse error: {self.message}"


class FramingError(DecodeError):
    """Raised when the length prefix is malformed or the payload is truncated"""
    pass
