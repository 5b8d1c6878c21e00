"""
Levi-Civita permutation symbol.
"""

from __future__ import annotations

from collections.abc import Sequence
import numpy as np

from pymatrix.core.exceptions import ValidationError


def levi_civita(indices: Sequence[int]) -> int:
    """
    Levi-Civita symbol epsilon_{i1 i2 ... in}.

    Returns 0 if any index repeats, otherwise the sign of the permutation
    the indices describe: the product over pairs p > q of
    sign(indices[p] - indices[q]). Indices need not be 1..n; only their
    relative order matters.

    Args:
        indices: Sequence of integer indices

    Returns:
        -1, 0 or 1 (1 for an empty or single-element sequence)

    Raises:
        ValidationError: If an entry is not an integer

    Example:
        >>> levi_civita([1, 2, 3]), levi_civita([2, 1, 3]), levi_civita([1, 1, 2])
        (1, -1, 0)
    """
    for value in indices:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"indices: expected integers, got {type(value).__name__}"
            )

    res = 1
    n = len(indices)
    for q in range(n):
        for p in range(q + 1, n):
            diff = int(indices[p]) - int(indices[q])
            if diff == 0:
                return 0
            if diff < 0:
                res = -res
    return res
