import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace

import numpy as np

from textmap.errors import ConfigurationError, InternalInvariantViolation
from textmap.mask import build_mask
from textmap.options import EncodingOptions
from textmap.rescale import rescale_mask
from textmap.symbols import Shape, SymbolTable

logger = logging.getLogger(__name__)


def block_indices(mask: np.ndarray, shape: Shape) -> np.ndarray:
    """Pattern number of every block, shape (n_rows // row_bits, n_cols // col_bits)."""
    row_bits, col_bits = shape
    n_rows, n_cols = mask.shape
    if n_rows % row_bits or n_cols % col_bits:
        raise InternalInvariantViolation(
            f"Mask of shape {n_rows}x{n_cols} does not split into {row_bits}x{col_bits} blocks"
        )

    bands, groups = n_rows // row_bits, n_cols // col_bits
    # (bands, row_bits, groups, col_bits) -> (bands, groups, row_bits * col_bits)
    blocks = mask.reshape(bands, row_bits, groups, col_bits).transpose(0, 2, 1, 3)
    blocks = blocks.reshape(bands, groups, row_bits * col_bits).astype(np.int64)
    weights = np.left_shift(1, np.arange(row_bits * col_bits, dtype=np.int64))
    return blocks @ weights


def _trim_blank(glyphs: list[str], blank: str) -> list[str]:
    end = len(glyphs)
    while end > 0 and (glyphs[end - 1] == blank or glyphs[end - 1].isspace()):
        end -= 1
    return glyphs[:end]


def mask_to_symbols(mask: np.ndarray, symbols: SymbolTable, trim_trailing_blank: bool = True) -> list[str]:
    """One string per band of ``symbols.row_bits`` mask rows."""
    symbols.validate("symbols")
    indices = block_indices(mask, symbols.shape)
    if indices.size and indices.max() >= len(symbols):
        raise InternalInvariantViolation(f"Block pattern {indices.max()} is outside a table of {len(symbols)}")

    glyph_arr = np.array(symbols.glyphs, dtype=object)
    lines = []
    for row in glyph_arr[indices]:
        glyphs = list(row)
        if trim_trailing_blank:
            glyphs = _trim_blank(glyphs, symbols.blank)
        lines.append("".join(glyphs))
    return lines


def _resolve_options(options, overrides) -> EncodingOptions:
    if options is None:
        options = EncodingOptions()
    try:
        if isinstance(options, Mapping):
            options = EncodingOptions(**{**options, **overrides})
        elif not isinstance(options, EncodingOptions):
            raise ConfigurationError(
                f"`options` should be EncodingOptions or a mapping, got {type(options).__name__}"
            )
        elif overrides:
            options = replace(options, **overrides)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid encoding option: {exc}") from None
    return options.validated()


def rescaled_mask(lines: Iterable[str], options: EncodingOptions) -> np.ndarray:
    """The mask ``encode`` turns into glyphs, for already validated ``options``."""
    mask = build_mask(lines, options.tab_width)
    return rescale_mask(mask, options.symbols.shape, options.n_rows, options.n_cols)


def encode(lines: Iterable[str], options: EncodingOptions | Mapping | None = None, **overrides) -> list[str]:
    """Encode the non-whitespace outline of ``lines`` as strings of glyphs.

    The lines become a boolean mask (True on ink), the mask is fitted into
    whole symbol blocks, at most ``n_rows`` x ``n_cols`` of them, OR-ing cells
    that collapse together, and every block is read as a binary number (top-left
    cell is the lowest bit) to pick its glyph.

    With the ``1x2`` table ``" ▌▐█"``, ``n_rows=3`` and ``n_cols=2``, the lines
    ``["aaaaa", " b b", "", " d d", "e e"]`` encode to ``["██", "▌▌", "█"]``::

        ttttt        tttt
        ftft    ->   tftf
                     ttff
        ftft
        tft

    ``overrides`` replace fields of ``options``, so ``encode(lines, n_cols=4)``
    works without building an ``EncodingOptions`` first.
    """
    options = _resolve_options(options, overrides)
    mask = rescaled_mask(lines, options)
    encoded = mask_to_symbols(mask, options.symbols, options.trim_trailing_blank)
    logger.debug("Encoded %dx%d mask into %d map rows", mask.shape[0], mask.shape[1], len(encoded))
    return encoded
