"""
termframe - Layered border frames for the terminal.

Draws any number of concentric border layers around the terminal window,
each with its own glyphs and color.

Import from submodules directly:
    from termframe.border import BorderBuilder, BorderType, BorderRenderer
    from termframe.screen import BaseLayer
    from termframe.config import FrameSettings
    from termframe.ui import AnsiCellSink, terminal_session
"""

import logging


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()

# Nothing is printed unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
