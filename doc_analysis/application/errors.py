from __future__ import annotations


class DocumentAnalysisError(Exception):
    """Base class for every failure raised by the analysis pipeline."""


class FetchError(DocumentAnalysisError):
    """The fetch collaborator failed for a given source."""

    def __init__(self, source_id: str, cause: BaseException):
        self.source_id = source_id
        self.cause = cause
        super().__init__(f"Failed to fetch '{source_id}': {type(cause).__name__}: {cause}")


class BodyNotFoundError(DocumentAnalysisError):
    """The fetched HTML page has no <body> element."""


class EmptyInputError(DocumentAnalysisError, ValueError):
    """Text handed to the tokenizer is empty or whitespace-only."""


class EmptyBodyError(DocumentAnalysisError, ValueError):
    """Fetched page text is empty or whitespace-only."""


class NoTokensFoundError(DocumentAnalysisError, ValueError):
    """Text is present but holds no word of three or more letters."""


class InvalidArgumentError(DocumentAnalysisError, ValueError):
    """Invalid input: a zero or negative count or total, too few documents, an empty word."""


class DivisionByZeroError(InvalidArgumentError):
    pass


class LengthMismatchError(DocumentAnalysisError, ValueError):
    """Vectors handed to cosine similarity differ in length."""


class ZeroMagnitudeError(DocumentAnalysisError, ValueError):
    """At least one vector has zero magnitude."""
