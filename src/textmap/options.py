from __future__ import annotations

import math
from dataclasses import dataclass, replace
from numbers import Integral, Real

from textmap.errors import ConfigurationError
from textmap.symbols import DEFAULT_SYMBOLS, SymbolTable

UNBOUNDED = "unbounded"
DEFAULT_TAB_WIDTH = 8


def normalize_cap(value, name: str) -> int | None:
    """Return a positive int cap, or None for an unbounded one."""
    if value is None or value == UNBOUNDED:
        return None
    if isinstance(value, bool):
        raise ConfigurationError(f"`{name}` should be a positive integer or {UNBOUNDED!r}, got {value!r}")
    if isinstance(value, Real) and not isinstance(value, Integral):
        if value == math.inf:
            return None
        if not math.isfinite(value) or not float(value).is_integer():
            raise ConfigurationError(f"`{name}` should be a positive integer or {UNBOUNDED!r}, got {value!r}")
        value = int(value)
    if not isinstance(value, Integral) or value < 1:
        raise ConfigurationError(f"`{name}` should be a positive integer or {UNBOUNDED!r}, got {value!r}")
    return int(value)


def normalize_tab_width(value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise ConfigurationError(f"`tab_width` should be a positive integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class EncodingOptions:
    """Options for a single ``encode`` call.

    ``n_rows`` and ``n_cols`` cap the output in glyphs; ``None`` (or
    ``"unbounded"``) means the output is just big enough for the input.
    """

    n_rows: int | str | None = None
    n_cols: int | str | None = None
    symbols: SymbolTable = DEFAULT_SYMBOLS
    trim_trailing_blank: bool = True
    tab_width: int = DEFAULT_TAB_WIDTH

    def validated(self) -> EncodingOptions:
        """Check every field and return a copy with normalized caps."""
        if not isinstance(self.symbols, SymbolTable):
            raise ConfigurationError(f"`symbols` should be a SymbolTable, got {type(self.symbols).__name__}")
        self.symbols.validate("symbols")
        if not isinstance(self.trim_trailing_blank, bool):
            raise ConfigurationError(f"`trim_trailing_blank` should be a bool, got {self.trim_trailing_blank!r}")
        return replace(
            self,
            n_rows=normalize_cap(self.n_rows, "n_rows"),
            n_cols=normalize_cap(self.n_cols, "n_cols"),
            tab_width=normalize_tab_width(self.tab_width),
        )
