from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

from doc_analysis.application.errors import InvalidArgumentError
from doc_analysis.application.services import statistics
from doc_analysis.application.services.document import Document
from doc_analysis.application.services.vectorizer import build_vectors


@dataclass(frozen=True)
class Corpus:
    """Ordered, read-only collection of loaded documents."""
    documents: Tuple[Document, ...]

    @classmethod
    def of(cls, documents: Iterable[Document]) -> "Corpus":
        return cls(documents=tuple(documents))

    @property
    def document_count(self) -> int:
        return len(self.documents)

    def __len__(self) -> int:
        return self.document_count

    def __getitem__(self, index: int) -> Document:
        return self.documents[index]

    def documents_with_word(self, word: str) -> int:
        return sum(1 for doc in self.documents if doc.contains(word))

    def term_frequency(self, word: str, index: int = 0) -> float:
        doc = self.documents[index]
        return statistics.term_frequency(doc.count_of(word), doc.total_words)

    def inverse_document_frequency(self, word: str) -> float:
        return statistics.inverse_document_frequency(
            self.document_count, self.documents_with_word(word)
        )

    def tf_idf(self, word: str, index: int = 0) -> float:
        return statistics.tf_idf(
            self.term_frequency(word, index), self.inverse_document_frequency(word)
        )

    def cosine_similarity(self, i: int = 0, j: int = 1) -> float:
        if self.document_count < 2:
            raise InvalidArgumentError("Cosine similarity needs at least two documents.")
        vec_a, vec_b = build_vectors(self.documents[i].word_counts, self.documents[j].word_counts)
        return statistics.cosine_similarity(vec_a, vec_b)
