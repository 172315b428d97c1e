"""
Shared helpers for converter input handling.
"""
from typing import Any

import numpy as np
import pandas as pd


def is_absent(value: Any) -> bool:
    """Check whether a value stands for SQL NULL.

    ``None`` and the pandas/NumPy missing markers are absent. Containers,
    classes and other non-scalar objects never are.

    >>> is_absent(None)
    True
    >>> is_absent(float('nan'))
    True
    >>> is_absent(0)
    False
    >>> is_absent('')
    False
    >>> is_absent(int)
    False
    """
    if value is None:
        return True
    if isinstance(value, type):
        return False
    return bool(pd.api.types.is_scalar(value) and pd.isna(value))


def unwrap_scalar(value: Any) -> Any:
    """Convert a NumPy scalar to its Python equivalent.

    >>> unwrap_scalar(np.int16(-3))
    -3
    >>> unwrap_scalar(np.bool_(True))
    True
    >>> unwrap_scalar('en-US')
    'en-US'
    """
    if isinstance(value, np.generic):
        return value.item()
    return value


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
