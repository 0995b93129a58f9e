"""Cosine similarity between weighted vectors of possibly different lengths."""
from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from domain.entities import WeightedTermVector
from domain.errors import VectorLengthMismatchError

VectorLike = Union[WeightedTermVector, Sequence[float]]


def _as_array(vector: VectorLike, length: int) -> np.ndarray:
    if isinstance(vector, WeightedTermVector):
        values = vector.padded(length)
    else:
        values = list(vector)
    array = np.zeros(length, dtype="float64")
    array[: len(values)] = values
    return array


def cosine_similarity(a: VectorLike, b: VectorLike, *, strict: bool = False) -> float:
    """Return the cosine of the angle between ``a`` and ``b``, in ``[0, 1]``.

    The shorter vector is padded with zeros. A zero magnitude makes the
    denominator 1, so degenerate vectors score 0 instead of NaN. With
    ``strict`` set, tagged vectors computed at different corpus sizes raise
    :class:`VectorLengthMismatchError` instead of being padded.
    """
    if (
        strict
        and isinstance(a, WeightedTermVector)
        and isinstance(b, WeightedTermVector)
        and a.corpus_size != b.corpus_size
    ):
        raise VectorLengthMismatchError(a.corpus_size, b.corpus_size)

    length = max(len(a), len(b))
    if length == 0:
        return 0.0
    left = _as_array(a, length)
    right = _as_array(b, length)

    dot = float(np.dot(left, right))
    denominator = float(np.linalg.norm(left) * np.linalg.norm(right)) or 1.0
    return float(min(max(dot / denominator, 0.0), 1.0))


__all__ = ["VectorLike", "cosine_similarity"]
