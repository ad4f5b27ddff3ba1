import numpy as np

from doc_analysis.application.services.vectorizer import build_vectors, vocabulary


def test_union_key_space_is_index_paired():
    a = {"a": 2, "b": 1}
    b = {"b": 3, "c": 5}
    vec_a, vec_b = build_vectors(a, b)
    keys = vocabulary(a, b)

    assert len(vec_a) == len(vec_b) == 3
    assert sorted(keys) == ["a", "b", "c"]

    i = keys.index("b")
    assert vec_a[i] == 1
    assert vec_b[i] == 3
    assert vec_a[keys.index("c")] == 0.0
    assert vec_b[keys.index("a")] == 0.0


def test_vectors_are_float():
    vec_a, vec_b = build_vectors({"abc": 1}, {"abc": 2})
    assert vec_a.dtype == np.float64
    assert vec_b.dtype == np.float64


def test_empty_mappings_give_empty_vectors():
    vec_a, vec_b = build_vectors({}, {})
    assert vec_a.size == 0
    assert vec_b.size == 0
