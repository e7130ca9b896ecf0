"""Type definitions for the CoreNLP client"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

from .config import DEFAULT_DRIVER_CLASS, Settings, settings as default_settings
from .validators import validate_annotators


# Marks an option the caller left out; None is a real value (e.g. no timeout)
UNSET: Any = object()


class Backend(str, Enum):
    """Backend enumeration"""
    CMD = "cmd"
    HTTP = "http"


def _normalize_annotators(annotators: Optional[Sequence[str]]) -> Tuple[str, ...]:
    # None or empty means "engine defaults"
    if annotators is None or (not isinstance(annotators, str) and len(annotators) == 0):
        return ()
    return tuple(validate_annotators(annotators))


def normalize_url(url: str) -> str:
    """Return the URL with exactly one trailing slash"""
    return url.rstrip("/") + "/"


@dataclass(frozen=True)
class CmdClientConfig:
    """Configuration of the command line backend"""
    annotators: Tuple[str, ...] = ()
    classpath: str = "*"
    driver_class: str = DEFAULT_DRIVER_CLASS
    java_cmd: str = "java"
    args: Tuple[str, ...] = ()
    timeout: Optional[float] = None
    temp_dir: Optional[Path] = None

    def __post_init__(self):
        object.__setattr__(self, "annotators", _normalize_annotators(self.annotators))
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_settings(
        cls,
        annotators: Optional[Sequence[str]] = None,
        settings: Optional[Settings] = None,
        **overrides
    ) -> "CmdClientConfig":
        """Build a config, taking every option left as UNSET from settings"""
        settings = settings or default_settings
        values = {
            "classpath": settings.classpath,
            "driver_class": settings.driver_class,
            "java_cmd": settings.java_cmd,
            "timeout": settings.process_timeout_seconds,
            "temp_dir": settings.temp_dir,
        }
        values.update({k: v for k, v in overrides.items() if v is not UNSET})
        return cls(annotators=() if annotators is None else annotators, **values)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration of the HTTP server backend"""
    annotators: Tuple[str, ...] = ()
    url: str = "http://127.0.0.1:9000/"
    timeout: Optional[float] = 30.0

    def __post_init__(self):
        object.__setattr__(self, "annotators", _normalize_annotators(self.annotators))
        object.__setattr__(self, "url", normalize_url(self.url))

    @classmethod
    def from_settings(
        cls,
        annotators: Optional[Sequence[str]] = None,
        settings: Optional[Settings] = None,
        **overrides
    ) -> "HttpClientConfig":
        """Build a config, taking every option left as UNSET from settings"""
        settings = settings or default_settings
        values = {
            "url": settings.server_url,
            "timeout": settings.http_timeout_seconds,
        }
        values.update({k: v for k, v in overrides.items() if v is not UNSET})
        return cls(annotators=() if annotators is None else annotators, **values)


# Type aliases
TextLike = Union[bytes, bytearray, str]
PathLike = Union[str, Path]
