"""CoreNLP backends and backend selection"""

import inspect
from typing import Optional, Sequence, Union

from ..core.config import Settings
from ..core.exceptions import ConfigurationError
from ..core.types import Backend
from .base_client import BaseClient
from .cmd_client import CmdClient
from .http_client import HttpClient

BACKENDS = {
    Backend.CMD: CmdClient,
    Backend.HTTP: HttpClient,
}


def _option_names(client_cls) -> set:
    params = inspect.signature(client_cls.__init__).parameters
    return set(params) - {"self", "annotators", "settings"}


def create_client(
    backend: Union[Backend, str],
    annotators: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
    **options
) -> BaseClient:
    """
    Create a client for the given backend

    Args:
        backend: "cmd" for a local process or "http" for a CoreNLP server
        annotators: Ordered annotator names (None for engine defaults)
        settings: Settings supplying defaults for omitted options
        **options: Backend specific options (classpath, url, timeout, ...)

    Raises:
        ConfigurationError: If the backend is unknown, an option does not
            belong to the backend or annotators are invalid
    """
    try:
        backend = Backend(backend)
    except ValueError:
        raise ConfigurationError(f"unknown backend '{backend}'") from None

    client_cls = BACKENDS[backend]
    unknown = sorted(set(options) - _option_names(client_cls))
    if unknown:
        raise ConfigurationError(
            f"unknown option(s) for backend '{backend.value}': {', '.join(unknown)}"
        )
    return client_cls(annotators, settings=settings, **options)


__all__ = ["BACKENDS", "BaseClient", "CmdClient", "HttpClient", "create_client"]
