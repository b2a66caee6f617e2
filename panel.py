import curses

from text_width import clip, display_width, printable, wrap


def put_text(win, y, x, text, attr=0, width=None):
    """Write ``text`` at (y, x), clipped to ``width`` columns and the window edge."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w:
        return
    limit = w - x if width is None else min(width, w - x)
    text = clip(printable(text), limit)
    if not text:
        return
    try:
        win.addnstr(y, x, text, len(text), attr)
    except curses.error:
        # curses raises when a write touches the last cell
        pass


def draw_box(win, title=""):
    h, w = win.getmaxyx()
    if h < 2 or w < 2:
        return
    try:
        win.box()
    except curses.error:
        pass
    if title:
        put_text(win, 0, 1, clip(title, w - 2))


def draw_text_panel(win, title, text):
    win.erase()
    draw_box(win, title)
    h, w = win.getmaxyx()
    inner_h = h - 2
    inner_w = w - 2
    if inner_h > 0 and inner_w > 0:
        for i, line in enumerate(wrap(text or "", inner_w)[:inner_h]):
            put_text(win, 1 + i, 1, line, width=inner_w)
    win.refresh()


def fits(text, width):
    return display_width(text) <= width
