# Frequency counting: tokens -> {word: count}
from collections import Counter
from typing import Dict, Iterable


def count_words(tokens: Iterable[str]) -> Dict[str, int]:
    """Count occurrences of each distinct token. No tokens -> empty dict."""
    return dict(Counter(tokens))
