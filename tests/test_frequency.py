from doc_analysis.application.services.frequency import count_words


def test_counts_each_distinct_token():
    tokens = ["war", "peace", "war", "treaty", "war"]
    counts = count_words(tokens)
    assert counts == {"war": 3, "peace": 1, "treaty": 1}
    assert sum(counts.values()) == len(tokens)
    assert len(counts) == len(set(tokens))


def test_empty_sequence_gives_empty_mapping():
    assert count_words([]) == {}


def test_accepts_any_iterable():
    assert count_words(iter(["abc", "abc"])) == {"abc": 2}
