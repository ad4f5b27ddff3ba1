from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from loguru import logger
from pydantic import BaseModel

from doc_analysis.application.errors import InvalidArgumentError
from doc_analysis.application.settings import Settings
from doc_analysis.application.services.corpus import Corpus
from doc_analysis.application.services.document import Document
from doc_analysis.application.services.tokenizer import Tokenizer
from doc_analysis.application.services.web_loader import WebLoaderService


# url -> page text
FetchFunc = Callable[[str], str]


class AnalysisReport(BaseModel):
    target_word: str
    sources: List[str]
    document_count: int
    documents_with_word: int
    term_frequency: float
    inverse_document_frequency: float
    cosine_similarity: float


@dataclass
class AnalysisService:
    settings: Settings
    fetch: FetchFunc
    tokenizer: Tokenizer = Tokenizer()

    @classmethod
    def build(cls, settings: Settings) -> "AnalysisService":
        loader = WebLoaderService(
            timeout_s=settings.request_timeout_s,
            user_agent=settings.user_agent,
            extraction_mode=settings.extraction_mode,
        )
        logger.info(
            "Using web loader (mode={}, timeout={}s)",
            settings.extraction_mode,
            settings.request_timeout_s,
        )
        return cls(settings=settings, fetch=loader.fetch)

    def load(self, sources: Sequence[str]) -> Corpus:
        """
        Load every source in order. The first failure aborts the whole load;
        a partially loaded corpus is never returned.
        """
        if not sources:
            raise InvalidArgumentError("At least one source is needed.")
        logger.info("Loading {} document(s)", len(sources))
        docs = [
            Document.load(src, lambda src=src: self.fetch(src), tokenizer=self.tokenizer)
            for src in sources
        ]
        return Corpus.of(docs)

    def analyze(self, corpus: Corpus, target_word: str) -> AnalysisReport:
        """
        TF of target_word in the first document, its IDF across the corpus,
        and cosine similarity between the first two documents.
        """
        if corpus.document_count < 2:
            raise InvalidArgumentError(
                f"At least two documents are needed, got {corpus.document_count}."
            )
        word = target_word.strip().lower()
        if not word:
            raise InvalidArgumentError("Target word cannot be empty.")

        report = AnalysisReport(
            target_word=word,
            sources=[doc.source_id for doc in corpus.documents],
            document_count=corpus.document_count,
            documents_with_word=corpus.documents_with_word(word),
            term_frequency=corpus.term_frequency(word, 0),
            inverse_document_frequency=corpus.inverse_document_frequency(word),
            cosine_similarity=corpus.cosine_similarity(0, 1),
        )
        logger.info(
            "Analyzed '{}': tf={:.6f} idf={:.6f} cosine={:.6f}",
            word,
            report.term_frequency,
            report.inverse_document_frequency,
            report.cosine_similarity,
        )
        return report

    def run(self, sources: Optional[Sequence[str]] = None, target_word: Optional[str] = None) -> AnalysisReport:
        """Load + analyze, with settings as defaults."""
        # only omitted values fall back to settings; empty ones are rejected
        if sources is None:
            sources = self.settings.sources
        if target_word is None:
            target_word = self.settings.target_word
        corpus = self.load(list(sources))
        return self.analyze(corpus, target_word)
