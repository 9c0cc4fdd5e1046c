import logging
from collections.abc import Iterable

import numpy as np

from textmap.errors import ConfigurationError
from textmap.options import DEFAULT_TAB_WIDTH, normalize_tab_width

logger = logging.getLogger(__name__)

# ASCII whitespace. Any other character, NO-BREAK SPACE included, is ink.
BLANK_CHARS = frozenset(" \t\n\v\f\r")


def expand_tabs(line: str, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Replace every tab with ``tab_width`` spaces (no tab-stop alignment)."""
    return line.replace("\t", " " * tab_width)


def build_mask(lines: Iterable[str], tab_width: int = DEFAULT_TAB_WIDTH) -> np.ndarray:
    """Convert text lines to a boolean mask of shape (len(lines), widest line).

    Each character takes one cell whatever its encoded length. Rows shorter
    than the widest one are padded with False.
    """
    tab_width = normalize_tab_width(tab_width)

    rows = []
    for i, line in enumerate(lines):
        if not isinstance(line, str):
            raise ConfigurationError(f"`lines[{i}]` should be a string, got {type(line).__name__}")
        rows.append([char not in BLANK_CHARS for char in expand_tabs(line, tab_width)])

    width = max((len(row) for row in rows), default=0)
    mask = np.zeros((len(rows), width), dtype=bool)
    for i, row in enumerate(rows):
        mask[i, : len(row)] = row

    logger.debug("Built %dx%d occupancy mask", mask.shape[0], mask.shape[1])
    return mask
