"""
Big-digit font and the four pixel packings used by the size tiers.

Each glyph is an 8x8 bitmap.  FULL paints one cell per pixel, HALF packs
two pixels side by side into a cell, QUADRANT packs 2x2 and SEXTANT 2x3.
"""

from typing import List

from .modes import SizeTier

GLYPH_HEIGHT = 8
GLYPH_WIDTH = 8

# 8x8 digits, drawn with the same block character the glyphs are printed with
GLYPHS = {
    '0': [
        " █████  ",
        "██   ██ ",
        "██  ███ ",
        "██ █ ██ ",
        "███  ██ ",
        "██   ██ ",
        " █████  ",
        "        ",
    ],
    '1': [
        "  ██    ",
        " ███    ",
        "  ██    ",
        "  ██    ",
        "  ██    ",
        "  ██    ",
        "██████  ",
        "        ",
    ],
    '2': [
        " █████  ",
        "██   ██ ",
        "     ██ ",
        "  ████  ",
        " ██     ",
        "██      ",
        "███████ ",
        "        ",
    ],
    '3': [
        " █████  ",
        "██   ██ ",
        "     ██ ",
        "  ████  ",
        "     ██ ",
        "██   ██ ",
        " █████  ",
        "        ",
    ],
    '4': [
        "   ███  ",
        "  ████  ",
        " ██ ██  ",
        "██  ██  ",
        "███████ ",
        "    ██  ",
        "    ██  ",
        "        ",
    ],
    '5': [
        "███████ ",
        "██      ",
        "██████  ",
        "     ██ ",
        "     ██ ",
        "██   ██ ",
        " █████  ",
        "        ",
    ],
    '6': [
        "  ████  ",
        " ██     ",
        "██      ",
        "██████  ",
        "██   ██ ",
        "██   ██ ",
        " █████  ",
        "        ",
    ],
    '7': [
        "███████ ",
        "██   ██ ",
        "    ██  ",
        "   ██   ",
        "  ██    ",
        "  ██    ",
        "  ██    ",
        "        ",
    ],
    '8': [
        " █████  ",
        "██   ██ ",
        "██   ██ ",
        " █████  ",
        "██   ██ ",
        "██   ██ ",
        " █████  ",
        "        ",
    ],
    '9': [
        " █████  ",
        "██   ██ ",
        "██   ██ ",
        " ██████ ",
        "     ██ ",
        "    ██  ",
        " ████   ",
        "        ",
    ],
    ':': [
        "        ",
        "   ██   ",
        "   ██   ",
        "        ",
        "   ██   ",
        "   ██   ",
        "        ",
        "        ",
    ],
    ' ': [
        "        ",
        "        ",
        "        ",
        "        ",
        "        ",
        "        ",
        "        ",
        "        ",
    ],
}

# Index bits: 1 top-left, 2 top-right, 4 bottom-left, 8 bottom-right
QUADRANTS = " ▘▝▀▖▌▞▛▗▚▐▜▄▙▟█"

HALVES = " ▌▐█"


def sextant_char(bits: int) -> str:
    """Block character for a 2x3 cell.

    Bits run left to right, top to bottom: 1 and 2 on the top row, 4 and 8
    in the middle, 16 and 32 at the bottom.  Unicode leaves out the four
    patterns that already exist as blank, full and half blocks.
    """
    if bits == 0:
        return " "
    if bits == 63:
        return "█"
    if bits == 21:
        return "▌"
    if bits == 42:
        return "▐"
    index = bits - 1
    if bits > 21:
        index -= 1
    if bits > 42:
        index -= 1
    return chr(0x1FB00 + index)


def pixels(text: str) -> List[List[bool]]:
    """Pixel rows for `text`, glyphs placed side by side."""
    rows = [[] for _ in range(GLYPH_HEIGHT)]
    for char in text:
        glyph = GLYPHS.get(char, GLYPHS[' '])
        for i in range(GLYPH_HEIGHT):
            rows[i].extend(cell != " " for cell in glyph[i])
    return rows


def _pixel(rows, y, x) -> bool:
    if y < len(rows) and x < len(rows[y]):
        return rows[y][x]
    return False


def _pack(rows, cell_w: int, cell_h: int, chars) -> List[str]:
    height = (len(rows) + cell_h - 1) // cell_h
    width = (len(rows[0]) + cell_w - 1) // cell_w if rows else 0
    lines = []
    for cy in range(height):
        line = ""
        for cx in range(width):
            bits = 0
            for dy in range(cell_h):
                for dx in range(cell_w):
                    if _pixel(rows, cy * cell_h + dy, cx * cell_w + dx):
                        bits |= 1 << (dy * cell_w + dx)
            line += chars(bits)
        lines.append(line)
    return lines


def render_text(text: str, tier: SizeTier) -> List[str]:
    """Render `text` as big digits for the given size tier."""
    rows = pixels(text)
    if tier is SizeTier.FULL:
        return ["".join("█" if on else " " for on in row) for row in rows]
    if tier is SizeTier.HALF:
        return _pack(rows, 2, 1, lambda bits: HALVES[bits])
    if tier is SizeTier.QUADRANT:
        return _pack(rows, 2, 2, lambda bits: QUADRANTS[bits])
    return _pack(rows, 2, 3, sextant_char)
