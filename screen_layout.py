import curses
from collections import namedtuple


Rect = namedtuple("Rect", ["y", "x", "h", "w"])

# list pane: border, "> " marker and one double-width glyph
LIST_WIDTH = 6
STRIP_H = 3
EXPLANATION_H = 4
STRIP_PANELS = ("simplified", "traditional", "strokes", "pinyin", "radical")


def compute_layout(height, width, list_width=LIST_WIDTH):
    """Panel rectangles keyed by name; empty rectangles are left out."""
    height = max(0, height)
    width = max(0, width)
    list_w = max(0, min(list_width, width))

    rects = {"list": Rect(0, 0, height, list_w)}

    right_x = list_w
    right_w = width - list_w
    strip_h = min(STRIP_H, height)
    expl_h = min(EXPLANATION_H, height - strip_h)
    extra_h = height - strip_h - expl_h

    count = len(STRIP_PANELS)
    for i, name in enumerate(STRIP_PANELS):
        x0 = right_w * i // count
        x1 = right_w * (i + 1) // count
        rects[name] = Rect(0, right_x + x0, strip_h, x1 - x0)

    rects["explanation"] = Rect(strip_h, right_x, expl_h, right_w)
    rects["extra"] = Rect(strip_h + expl_h, right_x, extra_h, right_w)

    return {name: r for name, r in rects.items() if r.h > 0 and r.w > 0}


class ScreenLayout:
    def __init__(self, stdscr, list_width=LIST_WIDTH, newwin=None):
        self.stdscr = stdscr
        self.list_width = list_width
        self._newwin = newwin or curses.newwin
        self.rebuild()

    def rebuild(self):
        self.H, self.W = self.stdscr.getmaxyx()
        self.rects = compute_layout(self.H, self.W, self.list_width)
        self.windows = {}
        for name, r in self.rects.items():
            win = self._newwin(r.h, r.w, r.y, r.x)
            # panels never own the cursor
            win.leaveok(True)
            self.windows[name] = win

    def window(self, name):
        return self.windows.get(name)
