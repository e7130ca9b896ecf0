"""Configuration settings for the CoreNLP client"""

from pathlib import Path
from typing import Optional
from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


DEFAULT_DRIVER_CLASS = "edu.stanford.nlp.pipeline.StanfordCoreNLP"
SERIALIZER_CLASS = "edu.stanford.nlp.pipeline.ProtobufAnnotationSerializer"


class Settings(BaseSettings):
    """Client settings

    Every field can be overridden with a ``CORENLP_``-prefixed environment
    variable or through a ``.env`` file.
    """

    # Service settings
    version: str = Field(default="0.1.0")

    # Process backend settings
    java_cmd: str = Field(default="java")
    classpath: str = Field(default="*")
    driver_class: str = Field(default=DEFAULT_DRIVER_CLASS)
    process_timeout_seconds: Optional[float] = Field(default=None, gt=0)
    temp_dir: Optional[Path] = Field(default=None)

    # HTTP backend settings
    server_url: str = Field(default="http://127.0.0.1:9000")
    http_timeout_seconds: float = Field(default=30.0, gt=0)

    # Logging settings
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    model_config = ConfigDict(
        env_prefix="CORENLP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
