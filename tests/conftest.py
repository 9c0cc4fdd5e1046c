import numpy as np
import pytest

from textmap.symbols import get_symbol_table


def mask_from(*rows: str) -> np.ndarray:
    """Build a boolean mask from rows drawn with '#' (ink) and '.' (blank)."""
    width = max((len(row) for row in rows), default=0)
    return np.array([[c == "#" for c in row.ljust(width, ".")] for row in rows], dtype=bool).reshape(
        len(rows), width
    )


@pytest.fixture
def halves():
    """The 1x2 block table: ' ', '▌', '▐', '█'."""
    return get_symbol_table("block", "1x2")
