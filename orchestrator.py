import curses

from detail_pane import DetailPane
from list_pane import ListPane
from screen_layout import LIST_WIDTH, ScreenLayout


RUNNING = "running"
EXITING = "exiting"

POLL_TIMEOUT_MS = 1000


class Orchestrator:
    def __init__(
        self,
        stdscr,
        session,
        poll_timeout_ms=POLL_TIMEOUT_MS,
        list_width=LIST_WIDTH,
        newwin=None,
    ):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        try:
            curses.raw()
        except curses.error:
            pass
        self.stdscr.nodelay(False)
        self.stdscr.timeout(poll_timeout_ms)

        self.session = session
        self.layout = ScreenLayout(stdscr, list_width=list_width, newwin=newwin)
        self.list_pane = ListPane(session)
        self.detail_pane = DetailPane(session)
        self.state = RUNNING

    # ---------------- UI ----------------

    def redraw(self):
        list_win = self.layout.window("list")
        if list_win is not None:
            self.list_pane.draw(list_win)
        self.detail_pane.draw(self.layout)

    def _resize(self):
        self.stdscr.erase()
        self.stdscr.refresh()
        self.layout.rebuild()

    # ---------------- input ----------------

    def handle_key(self, ch):
        if self.state != RUNNING:
            return self.state

        if ch == curses.KEY_UP:
            self.session.select_previous()
        elif ch == curses.KEY_DOWN:
            self.session.select_next()
        elif ch == ord("q"):
            self.state = EXITING
        elif ch == curses.KEY_RESIZE:
            self._resize()
        # -1 is the poll timeout; other keys are ignored
        return self.state

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()

        while self.state == RUNNING:
            self.redraw()
            self.handle_key(self.stdscr.getch())
