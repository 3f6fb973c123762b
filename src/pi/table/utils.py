"""Cell text utilities: ANSI-aware width measurement and truncation.

Colored content is treated as opaque: escape sequences are carried through
untouched and never counted towards the visible width of a cell.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"        # CSI
    r"|\x1b\]8;;[^\x07]*\x07"       # OSC 8
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (VS16, ZWJ sequences, skin tones, regional indicators) -> 2
    3. Otherwise delegate to wcwidth for the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove CSI / OSC 8 / APC escape sequences from *text*."""
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Strips ANSI escape sequences.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.

    Tabs are expected to be expanded by the caller (see :func:`expand_tabs`).
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += _grapheme_width(g)

    return _cache_width(stripped, total)


def expand_tabs(text: str, tab_width: int) -> str:
    """Replace every tab in *text* with *tab_width* spaces."""
    return text.replace("\t", " " * tab_width)


def text_lines(text: str) -> list[str]:
    """Split cell text into lines; empty text is a single empty line."""
    return text.split("\n")


def text_dimension(text: str) -> tuple[int, int]:
    """Return ``(width, line_count)`` of a multi-line cell text."""
    lines = text_lines(text)
    return max(visible_width(line) for line in lines), len(lines)


# ---------------------------------------------------------------------------
# extract_ansi_code
# ---------------------------------------------------------------------------

def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Extract an ANSI escape sequence starting at *pos* in *text*.

    Returns ``(code, length)`` where *code* is the full escape sequence string
    and *length* is the number of characters consumed, or ``None`` if there is
    no escape sequence at *pos*.
    """
    if pos >= len(text) or text[pos] != "\x1b":
        return None

    if pos + 1 >= len(text):
        return None

    next_ch = text[pos + 1]

    # CSI: ESC[ <params> <final>
    if next_ch == "[":
        i = pos + 2
        while i < len(text):
            ch = text[i]
            if ch in "mGKHJ":
                code = text[pos : i + 1]
                return (code, len(code))
            if ch.isdigit() or ch == ";":
                i += 1
                continue
            break
        return None

    # OSC / APC: ESC] or ESC_ ... (BEL | ESC\)
    if next_ch in "]_":
        i = pos + 2
        while i < len(text):
            ch = text[i]
            if ch == "\x07":
                code = text[pos : i + 1]
                return (code, len(code))
            if ch == "\x1b" and i + 1 < len(text) and text[i + 1] == "\\":
                code = text[pos : i + 2]
                return (code, len(code))
            i += 1
        return None

    return None


# ---------------------------------------------------------------------------
# truncate_to_width
# ---------------------------------------------------------------------------

def truncate_to_width(text: str, max_width: int, suffix: str = "") -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    If the text is wider than *max_width*, trailing graphemes are dropped and
    *suffix* is appended (the suffix counts towards the width).  A wide
    character that would straddle the limit is dropped whole.
    """
    if max_width <= 0:
        return ""

    if visible_width(text) <= max_width:
        return text

    suffix_width = visible_width(suffix)
    target_width = max_width - suffix_width
    if target_width <= 0:
        return _take_columns(suffix, max_width)

    return _take_columns(text, target_width) + suffix


def _take_columns(text: str, max_cols: int) -> str:
    """Return a prefix of *text* that fits within *max_cols* visible columns.

    ANSI codes are preserved; the text is cut at grapheme boundaries.
    """
    result: list[str] = []
    cols = 0
    i = 0

    while i < len(text):
        extracted = extract_ansi_code(text, i)
        if extracted is not None:
            code, length = extracted
            result.append(code)
            i += length
            continue

        # Take the whole grapheme cluster starting at i
        g = next(grapheme.graphemes(text[i:]))
        w = _grapheme_width(g)
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
        i += len(g)

    return "".join(result)


# ---------------------------------------------------------------------------
# Overwriting a slice of a rendered line
# ---------------------------------------------------------------------------

def overlay_text(line: str, text: str, offset: int) -> str:
    """Write *text* over *line* starting at visible column *offset*.

    The written text is clipped at the end of *line*; the line width never
    changes.  Columns are counted per character, which holds for the
    border lines this is used on.
    """
    chars = list(line)
    if offset < 0 or offset >= len(chars):
        return line

    col = offset
    for g in grapheme.graphemes(text):
        w = _grapheme_width(g)
        if w == 0:
            continue
        if col + w > len(chars):
            break
        chars[col] = g
        for extra in range(1, w):
            chars[col + extra] = ""
        col += w
    return "".join(chars)
