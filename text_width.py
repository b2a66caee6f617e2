import unicodedata


def char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in ("Cc", "Cf"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def printable(text: str) -> str:
    """Replace control characters, which would move the curses cursor, with spaces."""
    return "".join(" " if unicodedata.category(ch) == "Cc" else ch for ch in text)


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def clip(text: str, width: int) -> str:
    """Longest prefix of ``text`` that fits in ``width`` terminal columns."""
    if width <= 0:
        return ""
    used = 0
    for idx, ch in enumerate(text):
        cw = char_width(ch)
        if used + cw > width:
            return text[:idx]
        used += cw
    return text


def wrap(text: str, width: int) -> list[str]:
    """Hard-wrap ``text`` to ``width`` columns.

    Embedded newlines start new lines. Breaks fall on character boundaries,
    which suits CJK text; a wide glyph never straddles two lines.
    """
    if width <= 0:
        return []
    lines: list[str] = []
    for part in text.replace("\r\n", "\n").split("\n"):
        current = ""
        used = 0
        for ch in part:
            if ch == "\t":
                ch = " "
            cw = char_width(ch)
            if used + cw > width and current:
                lines.append(current)
                current = ""
                used = 0
            current += ch
            used += cw
        lines.append(current)
    return lines
