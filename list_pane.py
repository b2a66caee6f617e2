import curses

from panel import draw_box, fits, put_text
from text_width import display_width, printable


class ListPane:
    PAIR_HIGHLIGHT = 1
    TITLE = "目录"
    MARKER = "> "

    def __init__(self, session):
        self.session = session
        self.offset = 0
        self.colors_ok = False
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_HIGHLIGHT, -1, curses.COLOR_BLACK)
            self.colors_ok = True
        except curses.error:
            pass

    def highlight_attr(self):
        if self.colors_ok:
            return curses.color_pair(self.PAIR_HIGHLIGHT) | curses.A_BOLD
        return curses.A_BOLD | curses.A_REVERSE

    def title(self, width):
        full = f"{self.TITLE} {self.session.position_label()}"
        return full if fits(full, width - 2) else self.TITLE

    def adjust_offset(self, rows):
        """Scroll so the selected row is inside a window of ``rows`` rows."""
        total = len(self.session.entries)
        if rows <= 0 or total == 0:
            self.offset = 0
            return
        cursor = self.session.cursor
        if cursor is not None and 0 <= cursor < total:
            if cursor < self.offset:
                self.offset = cursor
            elif cursor >= self.offset + rows:
                self.offset = cursor - rows + 1
        self.offset = max(0, min(self.offset, total - rows))

    def visible_rows(self, rows):
        self.adjust_offset(rows)
        window = self.session.entries[self.offset : self.offset + rows]
        return list(enumerate(window, start=self.offset))

    def draw(self, win):
        win.erase()
        h, w = win.getmaxyx()
        draw_box(win, self.title(w))

        inner_w = w - 2
        pad = " " * len(self.MARKER)
        for i, (idx, entry) in enumerate(self.visible_rows(h - 2)):
            if idx == self.session.cursor:
                text = printable(f"{self.MARKER}{entry.simplified}")
                text += " " * max(0, inner_w - display_width(text))
                put_text(win, 1 + i, 1, text, self.highlight_attr(), width=inner_w)
            else:
                put_text(win, 1 + i, 1, f"{pad}{entry.simplified}", width=inner_w)
        win.refresh()
