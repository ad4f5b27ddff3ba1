# Tokenizer: raw text -> lowercase alphabetic words (any script, 3+ letters)
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import re

from doc_analysis.application.errors import EmptyInputError, InvalidArgumentError, NoTokensFoundError


@dataclass(frozen=True)
class Tokenizer:
    min_length: int = 3
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.min_length < 1:
            raise InvalidArgumentError(f"min_length must be at least 1, got {self.min_length}.")
        # [^\W\d_] = a letter in any script; digits, "_" and punctuation split words
        object.__setattr__(self, "pattern", re.compile(r"[^\W\d_]{%d,}" % self.min_length))

    def tokenize(self, text: str) -> List[str]:
        if not text or not text.strip():
            raise EmptyInputError("Input text cannot be empty.")

        # lowercase first, e.g. "Hello hello HI" -> ['hello', 'hello']
        toks = self.pattern.findall(text.lower())
        if not toks:
            raise NoTokensFoundError("No tokens found in the input text.")
        return toks


_default = Tokenizer()


def tokenize(text: str) -> List[str]:
    return _default.tokenize(text)
