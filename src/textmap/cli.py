import argparse
import logging
import sys
from pathlib import Path

from textmap.encoder import encode, rescaled_mask
from textmap.errors import ConfigurationError
from textmap.options import UNBOUNDED, EncodingOptions
from textmap.preview import mask_to_image
from textmap.symbols import SymbolFamily, get_symbol_table
from textmap.terminal import get_terminal_rows


def _cap(value: str) -> int | str:
    if value.lower() == UNBOUNDED:
        return UNBOUNDED
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer or {UNBOUNDED!r}, got {value!r}") from None


def _read_lines(source: str) -> list[str]:
    if source == "-":
        return sys.stdin.read().splitlines()
    path = Path(source)
    if not path.is_file():
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(1)
    return path.read_text(encoding="utf-8", errors="replace").splitlines()


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Render a text file as a minimap of block glyphs")
    parser.add_argument("file", nargs="?", default="-", help="Text file to encode, '-' for stdin (default: stdin)")
    parser.add_argument(
        "-r", "--rows", type=_cap, default=None, help="Maximum map rows (default: terminal height)"
    )
    parser.add_argument(
        "-c", "--cols", type=_cap, default=UNBOUNDED, help=f"Maximum map columns (default: {UNBOUNDED})"
    )
    parser.add_argument(
        "-f",
        "--family",
        default=SymbolFamily.BLOCK.value,
        choices=[f.value for f in SymbolFamily],
        help="Glyph family (default: block)",
    )
    parser.add_argument("-s", "--shape", default="3x2", help="Rows x columns of cells per glyph (default: 3x2)")
    parser.add_argument("-t", "--tab-width", type=int, default=8, help="Cells per tab character (default: 8)")
    parser.add_argument("--no-trim", action="store_true", default=False, help="Keep trailing blank glyphs")
    parser.add_argument("--mask-png", type=Path, default=None, help="Also save the rescaled mask as an image")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log pipeline steps to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s %(message)s",
    )

    lines = _read_lines(args.file)
    n_rows = args.rows if args.rows is not None else get_terminal_rows()

    try:
        options = EncodingOptions(
            n_rows=n_rows,
            n_cols=args.cols,
            symbols=get_symbol_table(args.family, args.shape),
            trim_trailing_blank=not args.no_trim,
            tab_width=args.tab_width,
        )
        encoded = encode(lines, options)
        if args.mask_png is not None:
            mask_to_image(rescaled_mask(lines, options.validated())).save(args.mask_png)
    except ConfigurationError as exc:
        print(f"textmap: {exc}", file=sys.stderr)
        sys.exit(2)

    print("\n".join(encoded))
