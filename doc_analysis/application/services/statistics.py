"""
Classic information-retrieval statistics.

All functions are pure and fail fast on degenerate input instead of
returning a fallback value.
"""
from __future__ import annotations
from typing import Sequence
import math

import numpy as np

from doc_analysis.application.errors import (
    DivisionByZeroError,
    InvalidArgumentError,
    LengthMismatchError,
    ZeroMagnitudeError,
)


def term_frequency(word_count: int, total_words: int) -> float:
    """TF = occurrences of the word / total words in the document."""
    if total_words == 0:
        raise DivisionByZeroError("Total word count cannot be zero.")
    if total_words < 0 or word_count < 0:
        raise InvalidArgumentError(
            f"Counts cannot be negative (word_count={word_count}, total_words={total_words})."
        )
    return word_count / total_words


def inverse_document_frequency(document_count: int, documents_with_word: int) -> float:
    """
    IDF = ln(document_count / documents_with_word).

    A word that appears in no document has no defined IDF, so
    documents_with_word <= 0 raises InvalidArgumentError instead of
    producing an infinite value.
    """
    if document_count <= 0:
        raise InvalidArgumentError(f"Document count must be positive, got {document_count}.")
    if documents_with_word <= 0:
        raise InvalidArgumentError(
            f"Number of documents containing the word must be positive, got {documents_with_word}."
        )
    return math.log(document_count / documents_with_word)


def tf_idf(tf: float, idf: float) -> float:
    return tf * idf


def cosine_similarity(vector_a: Sequence[float], vector_b: Sequence[float]) -> float:
    """cosine = dot(a, b) / (||a|| * ||b||)"""
    a = np.asarray(vector_a, dtype=np.float64)
    b = np.asarray(vector_b, dtype=np.float64)
    if a.shape != b.shape:
        raise LengthMismatchError(
            f"Vectors must be of the same length ({a.size} != {b.size})."
        )

    norm_a = float(np.linalg.norm(a))
    norm_b = float(np.linalg.norm(b))
    if norm_a == 0.0 or norm_b == 0.0:
        raise ZeroMagnitudeError(
            "One or both vectors have zero magnitude, cannot calculate cosine similarity."
        )
    return float(np.dot(a, b) / (norm_a * norm_b))
