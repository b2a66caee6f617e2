from typing import Optional

from dictionary_store import Entry
from selection import move_next, move_previous


class BrowserSession:
    def __init__(self, entries):
        self.entries: tuple[Entry, ...] = tuple(entries)
        self.cursor: Optional[int] = None

    def select_next(self) -> Optional[int]:
        self.cursor = move_next(self.cursor, len(self.entries))
        return self.cursor

    def select_previous(self) -> Optional[int]:
        self.cursor = move_previous(self.cursor, len(self.entries))
        return self.cursor

    def selected_entry(self) -> Optional[Entry]:
        if self.cursor is None:
            return None
        if not 0 <= self.cursor < len(self.entries):
            return None
        return self.entries[self.cursor]

    def position_label(self) -> str:
        total = len(self.entries)
        if self.selected_entry() is None:
            return f"-/{total}"
        return f"{self.cursor + 1}/{total}"
