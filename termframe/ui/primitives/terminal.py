"""
Terminal lifecycle.

Puts the terminal into a drawable state (raw mode, alternate screen, hidden
cursor) and always puts it back, even if drawing fails.
"""

import os
import shutil
import sys
from contextlib import contextmanager
from typing import TextIO

# Platform-specific imports
if os.name != 'nt':
    import termios
    import tty


ENTER_ALT_SCREEN = "\x1b[?1049h"
LEAVE_ALT_SCREEN = "\x1b[?1049l"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"


def get_window_size() -> tuple[int, int]:
    """Current terminal size as (columns, rows)."""
    size = shutil.get_terminal_size()
    return size.columns, size.lines


@contextmanager
def raw_terminal():
    """Context manager for raw terminal mode (Unix only, no-op on Windows or without a tty)."""
    if os.name == 'nt' or not sys.stdin.isatty():
        yield None
    else:
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield fd
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


@contextmanager
def terminal_session(stream: TextIO = None, raw: bool = True):
    """
    Enter the alternate screen with the cursor hidden for the duration.

    On exit the screen is cleared, the cursor homed and shown again, and the
    original screen and terminal mode restored.

    Args:
        stream: Where escape sequences go (defaults to stdout)
        raw: Also switch stdin to raw mode
    """
    stream = stream or sys.stdout
    mode = raw_terminal() if raw else _no_raw_mode()
    with mode:
        stream.write(ENTER_ALT_SCREEN + HIDE_CURSOR)
        stream.flush()
        try:
            yield stream
        finally:
            stream.write(CLEAR_SCREEN + CURSOR_HOME + SHOW_CURSOR + LEAVE_ALT_SCREEN)
            stream.flush()


@contextmanager
def _no_raw_mode():
    yield None
