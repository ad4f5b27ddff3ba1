from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional, TextIO, Tuple
import sys

from loguru import logger

from doc_analysis.application.errors import EmptyBodyError, FetchError, NoTokensFoundError
from doc_analysis.application.services.frequency import count_words
from doc_analysis.application.services.tokenizer import Tokenizer


@dataclass(frozen=True)
class Document:
    """
    One fetched source: its text, tokens and word counts.

    Built once by `Document.load` (which performs the fetch) and never
    mutated afterwards. Equality and hashing use source_id and tokens.
    Invariant:
        total_words == sum(word_counts.values()) == len(tokens)
    """
    source_id: str
    raw_text: str = field(repr=False, compare=False)
    tokens: Tuple[str, ...] = field(repr=False)
    word_counts: Mapping[str, int] = field(repr=False, compare=False)
    total_words: int = field(compare=False)

    @classmethod
    def load(
        cls,
        source_id: str,
        fetch_text: Callable[[], str],
        tokenizer: Optional[Tokenizer] = None,
    ) -> "Document":
        """
        Fetch once, then tokenize and count.

        Raises:
            FetchError if fetch_text fails (original error kept as __cause__)
            EmptyBodyError if the fetched text is blank
            NoTokensFoundError if the text has no word of 3+ letters
        """
        if source_id is None:
            raise ValueError("source_id cannot be None.")

        try:
            text = fetch_text()
        except EmptyBodyError as e:
            logger.error("Error loading page '{}': {}", source_id, e)
            raise
        except Exception as e:
            logger.error("Error loading page '{}': {}", source_id, e)
            raise FetchError(source_id, e) from e

        if not text or not text.strip():
            logger.error("Error loading page '{}': body is empty", source_id)
            raise EmptyBodyError(f"Body of '{source_id}' is empty.")

        try:
            tokens = (tokenizer or Tokenizer()).tokenize(text)
        except NoTokensFoundError as e:
            logger.error("Error tokenizing '{}': {}", source_id, e)
            raise
        counts = count_words(tokens)
        logger.debug(
            "Loaded '{}': {} token(s), {} distinct word(s)", source_id, len(tokens), len(counts)
        )
        return cls(
            source_id=source_id,
            raw_text=text,
            tokens=tuple(tokens),
            word_counts=MappingProxyType(counts),
            total_words=len(tokens),
        )

    def count_of(self, word: str) -> int:
        return self.word_counts.get(word.lower(), 0)

    def contains(self, word: str) -> bool:
        return self.count_of(word) > 0

    def word_occurrences_lines(self) -> Iterator[str]:
        for word, count in self.word_counts.items():
            yield f"{word}: {count}"

    def print_word_occurrences(self, sink: TextIO = sys.stdout) -> None:
        for line in self.word_occurrences_lines():
            print(line, file=sink)
