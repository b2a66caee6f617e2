import curses
import locale
import sys

from _version import __version__
from app_state import BrowserSession
from config_paths import load_config
from dictionary_store import DictionaryLoadError, load_dictionary
from orchestrator import Orchestrator


USAGE = (
    "zidian - terminal Chinese character dictionary\n\n"
    "Usage:\n  zidian [path]\n  zidian -v\n  zidian -h\n\n"
    "Keys:\n  Up/Down  select entry\n  q        quit\n"
)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args:
        print(USAGE)
        return 0

    if len(args) > 1 or any(a.startswith("-") for a in args):
        print(USAGE, file=sys.stderr)
        return 1

    cfg = load_config()
    path = args[0] if args else cfg["DICTIONARY_PATH"]

    # load before touching the terminal so errors land on a normal screen
    try:
        entries = load_dictionary(path)
    except DictionaryLoadError as exc:
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    session = BrowserSession(entries)

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    def curses_main(stdscr):
        Orchestrator(
            stdscr,
            session,
            poll_timeout_ms=cfg["POLL_TIMEOUT_MS"],
            list_width=cfg["LIST_WIDTH"],
        ).run()

    # curses.wrapper restores the terminal on every exit path
    try:
        curses.wrapper(curses_main)
    except curses.error as exc:
        print(f"Terminal error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
