from __future__ import annotations
from typing import List, Mapping, Tuple

import numpy as np


def vocabulary(a: Mapping[str, int], b: Mapping[str, int]) -> List[str]:
    # union of keys: a's keys in order, then b's keys not seen in a
    return list(dict.fromkeys([*a, *b]))


def build_vectors(a: Mapping[str, int], b: Mapping[str, int]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Align two frequency mappings on their shared key space.

    Example: a={"war": 2, "army": 1}, b={"army": 3, "peace": 5}
        keys    = ["war", "army", "peace"]
        returns (array([2., 1., 0.]), array([0., 3., 5.]))

    A key missing from one mapping is 0.0 in that vector. Empty mappings
    give empty vectors.
    """
    keys = vocabulary(a, b)
    vec_a = np.array([a.get(k, 0) for k in keys], dtype=np.float64)
    vec_b = np.array([b.get(k, 0) for k in keys], dtype=np.float64)
    return vec_a, vec_b
