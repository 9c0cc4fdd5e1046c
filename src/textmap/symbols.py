from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from textmap import charsets
from textmap.errors import ConfigurationError

Shape = tuple[int, int]


class SymbolFamily(str, Enum):
    BLOCK = "block"
    DOT = "dot"


def parse_shape(shape: Shape | str, name: str = "shape") -> Shape:
    """Normalize ``(row_bits, col_bits)`` or ``"RxC"`` into a tuple of ints."""
    if isinstance(shape, str):
        parts = shape.lower().split("x")
        if len(parts) != 2 or not all(p.strip().isascii() and p.strip().isdigit() for p in parts):
            raise ConfigurationError(f"`{name}` should look like 'RxC', got {shape!r}")
        shape = (int(parts[0]), int(parts[1]))

    try:
        row_bits, col_bits = shape
    except (TypeError, ValueError):
        raise ConfigurationError(f"`{name}` should be a (row_bits, col_bits) pair, got {shape!r}") from None

    for label, value in (("row_bits", row_bits), ("col_bits", col_bits)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError(f"`{name}` {label} should be a positive integer, got {value!r}")
    return (row_bits, col_bits)


@dataclass(frozen=True)
class SymbolTable:
    """Glyph for every pattern of a ``(row_bits, col_bits)`` block.

    Block cell ``(r, c)`` is bit ``r * col_bits + c``: top-left is the lowest
    bit. Entry 0 is the blank glyph, the last entry the fully filled one.
    """

    glyphs: tuple[str, ...]
    shape: Shape

    @classmethod
    def from_glyphs(cls, glyphs: Iterable[str], shape: Shape | str) -> SymbolTable:
        """Build a table from any iterable of glyphs (a plain string works too)."""
        return cls(glyphs=tuple(glyphs), shape=parse_shape(shape))

    @property
    def row_bits(self) -> int:
        return self.shape[0]

    @property
    def col_bits(self) -> int:
        return self.shape[1]

    @property
    def blank(self) -> str:
        return self.glyphs[0]

    @property
    def full(self) -> str:
        return self.glyphs[-1]

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index]

    def validate(self, name: str = "symbols") -> None:
        """Raise ConfigurationError unless shape and glyph count agree."""
        if not isinstance(self.shape, tuple):
            raise ConfigurationError(f"`{name}.shape` should be a (row_bits, col_bits) tuple, got {self.shape!r}")
        row_bits, col_bits = parse_shape(self.shape, f"{name}.shape")
        expected = 2 ** (row_bits * col_bits)
        if not isinstance(self.glyphs, tuple):
            raise ConfigurationError(f"`{name}.glyphs` should be a tuple, got {type(self.glyphs).__name__}")
        if len(self.glyphs) != expected:
            raise ConfigurationError(
                f"`{name}` with shape {row_bits}x{col_bits} should have {expected} glyphs, got {len(self.glyphs)}"
            )
        for i, glyph in enumerate(self.glyphs):
            if not isinstance(glyph, str) or glyph == "":
                raise ConfigurationError(f"`{name}[{i}]` should be a non-empty string, got {glyph!r}")


def _table(glyphs: Iterable[str], row_bits: int, col_bits: int) -> SymbolTable:
    return SymbolTable(glyphs=tuple(glyphs), shape=(row_bits, col_bits))


_BLOCK_TABLES = {
    (1, 1): _table(charsets.FULL, 1, 1),
    (1, 2): _table(charsets.HALVES_VERTICAL, 1, 2),
    (2, 1): _table(charsets.HALVES_HORIZONTAL, 2, 1),
    (2, 2): _table(charsets.QUADRANTS, 2, 2),
    (3, 2): _table(charsets.SEXTANTS, 3, 2),
}

_DOT_TABLES = {
    (r, c): _table(charsets.braille_glyphs(r, c), r, c) for r in range(1, 5) for c in range(1, 3)
}

_CATALOG: Mapping[SymbolFamily, Mapping[Shape, SymbolTable]] = MappingProxyType(
    {
        SymbolFamily.BLOCK: MappingProxyType(_BLOCK_TABLES),
        SymbolFamily.DOT: MappingProxyType(_DOT_TABLES),
    }
)

DEFAULT_SYMBOLS = _BLOCK_TABLES[(3, 2)]


def _family(family: SymbolFamily | str) -> SymbolFamily:
    try:
        return SymbolFamily(family)
    except ValueError:
        choices = ", ".join(f.value for f in SymbolFamily)
        raise ConfigurationError(f"Unknown symbol family {family!r} (expected one of: {choices})") from None


def available_shapes(family: SymbolFamily | str) -> list[Shape]:
    """Shapes shipped for a family, smallest first."""
    return sorted(_CATALOG[_family(family)])


def get_symbol_table(family: SymbolFamily | str, shape: Shape | str) -> SymbolTable:
    family = _family(family)
    shape = parse_shape(shape)
    try:
        return _CATALOG[family][shape]
    except KeyError:
        shipped = ", ".join(f"{r}x{c}" for r, c in available_shapes(family))
        raise ConfigurationError(
            f"No {family.value} symbols for shape {shape[0]}x{shape[1]} (available: {shipped})"
        ) from None
