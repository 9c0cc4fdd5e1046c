# Full block, used for the single-cell table
FULL = " █"

# Half blocks: left/right (1x2) and upper/lower (2x1)
HALVES_VERTICAL = " ▌▐█"
HALVES_HORIZONTAL = " ▀▄█"

# Quadrants ordered by block pattern (top-left is the lowest bit)
QUADRANTS = " ▘▝▀▖▌▞▛▗▚▐▜▄▙▟█"

# Symbols for Legacy Computing sextants: U+1FB00 to U+1FB3B (60 characters).
# The four patterns already covered by block elements are skipped by Unicode.
SEXTANT_BASE = 0x1FB00
SEXTANT_EXISTING = {0: " ", 21: "▌", 42: "▐", 63: "█"}

# Braille patterns: U+2800 to U+28FF (256 characters, 2x4 dot grid)
BRAILLE_BASE = 0x2800

# Braille dot bit for every (row, col) position of the 4x2 dot grid
BRAILLE_DOTS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)


def _sextants() -> str:
    glyphs = []
    code = SEXTANT_BASE
    for pattern in range(64):
        if pattern in SEXTANT_EXISTING:
            glyphs.append(SEXTANT_EXISTING[pattern])
        else:
            glyphs.append(chr(code))
            code += 1
    return "".join(glyphs)


SEXTANTS = _sextants()


def braille_glyphs(row_bits: int, col_bits: int) -> tuple[str, ...]:
    """Braille glyph for every pattern of a block at most 4 rows by 2 columns.

    Cell ``(r, c)`` of the block lights the braille dot at the same position.
    Pattern 0 maps to a plain space rather than the empty braille cell.
    """
    if not (1 <= row_bits <= len(BRAILLE_DOTS) and 1 <= col_bits <= len(BRAILLE_DOTS[0])):
        raise ValueError(f"Braille cannot represent a {row_bits}x{col_bits} block")

    glyphs = [" "]
    for pattern in range(1, 2 ** (row_bits * col_bits)):
        dots = 0
        for r in range(row_bits):
            for c in range(col_bits):
                if pattern >> (r * col_bits + c) & 1:
                    dots |= BRAILLE_DOTS[r][c]
        glyphs.append(chr(BRAILLE_BASE + dots))
    return tuple(glyphs)
