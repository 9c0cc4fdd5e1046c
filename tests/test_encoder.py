import numpy as np
import pytest

from textmap.encoder import block_indices, encode, mask_to_symbols
from textmap.errors import ConfigurationError, InternalInvariantViolation
from textmap.options import EncodingOptions
from textmap.symbols import SymbolTable, get_symbol_table
from tests.conftest import mask_from

SEXTANT_TOP = "\U0001fb02"  # 🬂, pattern 0b000011
SEXTANT_TOP_RIGHT = "\U0001fb01"  # 🬁, pattern 0b000010


@pytest.mark.parametrize("r", range(3))
@pytest.mark.parametrize("c", range(2))
def test_block_bit_order(r, c):
    mask = np.zeros((3, 2), dtype=bool)
    mask[r, c] = True
    assert block_indices(mask, (3, 2)).tolist() == [[2 ** (r * 2 + c)]]


def test_block_indices_scan_order():
    mask = mask_from(
        "#..#",
        "##..",
    )
    # bands top to bottom, groups left to right
    assert block_indices(mask, (1, 2)).tolist() == [[1, 2], [3, 0]]
    assert block_indices(mask, (2, 2)).tolist() == [[1 + 4 + 8, 2]]


def test_block_indices_needs_whole_blocks():
    with pytest.raises(InternalInvariantViolation):
        block_indices(np.zeros((4, 2), dtype=bool), (3, 2))


def test_full_block():
    assert encode(["aa", "aa", "aa"]) == ["█"]


def test_top_row_only():
    assert encode(["aa"]) == [SEXTANT_TOP]


def test_column_cap():
    assert encode(["a  a  aa"], n_cols=2) == [SEXTANT_TOP + SEXTANT_TOP_RIGHT]


def test_blank_rows_keep_row_count():
    assert encode(["    "] * 4) == ["", ""]
    assert encode(["    "] * 4, trim_trailing_blank=False) == ["  ", "  "]


def test_documented_example(halves):
    lines = ["aaaaa", " b b", "", " d d", "e e"]
    assert encode(lines, n_rows=3, n_cols=2, symbols=halves) == ["██", "▌▌", "█"]


def test_empty_input():
    assert encode([]) == []
    assert encode([], n_rows=3, n_cols=3, trim_trailing_blank=False) == []


@pytest.mark.parametrize(
    "lines",
    [["   "] * 5, ["\t", "  "], [""] * 4, [" " * 50] * 31],
)
@pytest.mark.parametrize("family, shape", [("block", "3x2"), ("block", "2x2"), ("dot", "4x2")])
def test_blank_in_blank_out(lines, family, shape):
    symbols = get_symbol_table(family, shape)
    untrimmed = encode(lines, symbols=symbols, trim_trailing_blank=False, n_cols=7)
    assert set("".join(untrimmed)) <= {symbols.blank}
    assert encode(lines, symbols=symbols, n_cols=7) == [""] * len(untrimmed)


def test_row_cap_is_monotonic():
    lines = ["x" * (i % 7 + 1) for i in range(30)]
    unbounded = encode(lines)
    assert len(unbounded) == 10
    assert len(encode(lines, n_rows=4)) == 4
    assert encode(lines, n_rows=50) == unbounded
    assert encode(lines, n_rows="unbounded") == unbounded


@pytest.mark.parametrize("shape", ["1x2", "2x1", "2x2", "3x2"])
def test_output_is_whole_blocks(shape):
    symbols = get_symbol_table("block", shape)
    lines = ["some text", "", "\tindented line", "x"]
    result = encode(lines, symbols=symbols, trim_trailing_blank=False)
    width = -(-len(" " * 8 + "indented line") // symbols.col_bits)
    assert len(result) == -(-len(lines) // symbols.row_bits)
    assert all(len(row) == width for row in result)


def test_single_ink_cell_is_never_lost():
    lines = [""] * 100
    lines[57] = " " * 40 + "x"
    result = encode(lines, n_rows=5, n_cols=3)
    assert len(result) == 5
    assert sum(1 for row in result for glyph in row if glyph != " ") == 1


def test_trim_only_trailing():
    symbols = get_symbol_table("block", "1x1")
    assert encode(["  a  a  "], symbols=symbols) == ["  █  █"]
    assert encode(["  a  a  "], symbols=symbols, trim_trailing_blank=False) == ["  █  █  "]


def test_trim_strips_non_space_blank_glyph():
    symbols = SymbolTable.from_glyphs(".#", (1, 1))
    assert encode(["a  ", " a"], symbols=symbols) == ["#", ".#"]
    assert encode(["a  "], symbols=symbols, trim_trailing_blank=False) == ["#.."]


def test_tab_width_option(halves):
    assert encode(["\tx"], tab_width=1, symbols=halves) == ["▐"]
    assert encode(["\tx"], symbols=halves) == ["    ▌"]


def test_multibyte_characters():
    assert encode(["éé", "日本", "ßß"]) == ["█"]


def test_dot_symbols():
    assert encode(["ab", "cd", "ef", "gh"], symbols=get_symbol_table("dot", "4x2")) == ["⣿"]
    assert encode(["a", " b"], symbols=get_symbol_table("dot", "2x2")) == ["⠑"]


def test_options_object_and_overrides(halves):
    options = EncodingOptions(n_cols=1, symbols=halves)
    assert encode(["a   a"], options) == ["█"]
    assert encode(["a   a"], options, n_cols=None) == ["▌ ▌"]


def test_options_mapping():
    assert encode(["aa"], {"n_rows": 1, "trim_trailing_blank": False}) == [SEXTANT_TOP]


def test_mask_to_symbols_validates_table():
    with pytest.raises(ConfigurationError, match="should have 4 glyphs"):
        mask_to_symbols(np.zeros((1, 2), dtype=bool), SymbolTable.from_glyphs(" ▌▐", (1, 2)))


@pytest.mark.parametrize(
    "overrides, match",
    [
        ({"symbols": SymbolTable.from_glyphs(" ▌▐", (1, 2))}, "should have 4 glyphs"),
        ({"symbols": SymbolTable(glyphs=(" ", "█"), shape=(1, 2))}, "should have 4 glyphs"),
        ({"symbols": " ▌▐█"}, "SymbolTable"),
        ({"symbols": None}, "SymbolTable"),
        ({"n_rows": 0}, "n_rows"),
        ({"n_cols": -3}, "n_cols"),
        ({"n_cols": "wide"}, "n_cols"),
        ({"n_rows": 2.5}, "n_rows"),
        ({"tab_width": 0}, "tab_width"),
        ({"trim_trailing_blank": "yes"}, "trim_trailing_blank"),
        ({"colour": True}, "Invalid encoding option"),
    ],
)
def test_configuration_errors(overrides, match):
    with pytest.raises(ConfigurationError, match=match):
        encode(["aa"], **overrides)


def test_rejects_unknown_options_type():
    with pytest.raises(ConfigurationError, match="options"):
        encode(["aa"], options=[("n_rows", 1)])


def test_fails_before_reading_lines():
    lines = iter(["aa"])
    with pytest.raises(ConfigurationError):
        encode(lines, n_rows=0)
    assert next(lines) == "aa"


def test_integral_float_cap_accepted():
    assert encode(["aa"], n_rows=1.0) == encode(["aa"], n_rows=1)


def test_string_shape_table_rejected_before_encoding():
    symbols = SymbolTable(glyphs=(" ", "▌", "▐", "█"), shape="1x2")
    lines = iter(["a a"])
    with pytest.raises(ConfigurationError, match=r"symbols\.shape"):
        encode(lines, symbols=symbols)
    assert next(lines) == "a a"
