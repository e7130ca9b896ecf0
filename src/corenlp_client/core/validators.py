"""Data validation utilities for the CoreNLP client"""

from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, field_validator, Field

from .exceptions import (
    ConfigurationError,
    EmptyInputError,
    MissingDocumentError
)


class AnnotatorListValidator(BaseModel):
    """Validator for annotator lists

    Only checks that names are present. Dependency order between annotators
    is documented in ``ANNOTATOR_REQUIREMENTS`` but never enforced.
    """

    annotators: List[str] = Field(..., description="Ordered annotator names")

    @field_validator('annotators', mode='before')
    @classmethod
    def validate_annotators(cls, v):
        """Validate annotator names"""
        # a str is a sequence of characters, not of names
        if isinstance(v, str):
            raise ConfigurationError(
                "annotators must be a list of names, not a string",
                annotator=v
            )
        if not v:
            raise ConfigurationError("at least one annotator is required")

        for i, ann in enumerate(v):
            if not isinstance(ann, str):
                raise ConfigurationError(
                    f"annotator at index {i} is not a string",
                    annotator=repr(ann),
                    index=i
                )
            if not ann.strip():
                raise ConfigurationError(
                    f"annotator at index {i} is empty or whitespace",
                    annotator=ann,
                    index=i
                )
        return list(v)


def validate_annotators(annotators: Optional[Sequence[str]]) -> List[str]:
    """
    Validate a requested annotator list

    Args:
        annotators: Ordered annotator names

    Returns:
        The annotators as a new list, order preserved

    Raises:
        ConfigurationError: If the list is None or empty, or any entry is
            empty or whitespace only
    """
    return AnnotatorListValidator(annotators=annotators).annotators


def validate_run_input(text: Any, document: Any) -> bytes:
    """
    Check the arguments of a single annotation call and normalize the text

    Raises:
        EmptyInputError: If the text is empty
        MissingDocumentError: If no output document is given
    """
    if not text:
        raise EmptyInputError()
    if document is None:
        raise MissingDocumentError()
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)
