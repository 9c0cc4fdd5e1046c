import logging

import numpy as np

from textmap.errors import ConfigurationError, InternalInvariantViolation
from textmap.options import normalize_cap
from textmap.symbols import Shape, parse_shape

logger = logging.getLogger(__name__)


def axis_index_map(n_src: int, n_out: int) -> np.ndarray:
    """Output index of every source index along one axis: floor(i * n_out / n_src).

    With ``n_out <= n_src`` the map is non-decreasing and hits every output
    index, so no output row or column is left without a source.
    """
    return np.arange(n_src, dtype=np.int64) * n_out // n_src


def _scaled_size(n_src: int, bits: int, cap: int | None) -> tuple[int, int]:
    """Cells holding scaled content, and that count rounded up to whole blocks."""
    n_scaled = n_src if cap is None else min(n_src, cap * bits)
    return n_scaled, -(-n_scaled // bits) * bits


def _or_reduce(mask: np.ndarray, n_out: int, axis: int) -> np.ndarray:
    n_src = mask.shape[axis]
    if n_out == n_src:
        return mask
    index = axis_index_map(n_src, n_out)
    starts = np.flatnonzero(np.diff(index, prepend=-1))
    if len(starts) != n_out:
        raise InternalInvariantViolation(f"Rescaling {n_src} cells to {n_out} reached only {len(starts)} of them")
    return np.logical_or.reduceat(mask, starts, axis=axis)


def rescale_mask(mask, shape: Shape | str, max_rows=None, max_cols=None) -> np.ndarray:
    """Shrink a mask to whole blocks of ``shape``, at most ``max_rows`` x ``max_cols`` blocks.

    Rows and columns are aggregated independently. An output cell is True if
    any source cell mapped onto it is True. When the mask already fits, it is
    only padded with False up to whole blocks.
    """
    row_bits, col_bits = parse_shape(shape)
    max_rows = normalize_cap(max_rows, "max_rows")
    max_cols = normalize_cap(max_cols, "max_cols")

    mask = np.asarray(mask, dtype=bool)
    if mask.ndim != 2:
        raise ConfigurationError(f"`mask` should be two-dimensional, got shape {mask.shape}")

    src_rows, src_cols = mask.shape
    n_rows, res_rows = _scaled_size(src_rows, row_bits, max_rows)
    n_cols, res_cols = _scaled_size(src_cols, col_bits, max_cols)

    res = np.zeros((res_rows, res_cols), dtype=bool)
    if src_rows == 0 or src_cols == 0:
        return res

    scaled = _or_reduce(_or_reduce(mask, n_rows, axis=0), n_cols, axis=1)
    res[:n_rows, :n_cols] = scaled

    logger.debug("Rescaled %dx%d mask to %dx%d", src_rows, src_cols, res_rows, res_cols)
    return res
