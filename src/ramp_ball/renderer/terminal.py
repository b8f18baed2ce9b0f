# MIT License (see LICENSE)
"""
Terminal state handling.

The demo hides the cursor while it animates. hidden_cursor() restores it on
every way out of the block: normal return, an exception, or Ctrl-C.
"""
from __future__ import annotations
from contextlib import contextmanager
import logging
import sys
from typing import Iterator, TextIO

from ..constants import HIDE_CURSOR, SHOW_CURSOR

logger = logging.getLogger(__name__)


@contextmanager
def hidden_cursor(output: TextIO | None = None) -> Iterator[TextIO]:
    """
    Hide the terminal cursor for the duration of the block.

    Example:
        with hidden_cursor(sys.stdout) as out:
            out.write(frame)
    """
    output = output or sys.stdout
    output.write(HIDE_CURSOR)
    output.flush()
    try:
        yield output
    finally:
        try:
            output.write(SHOW_CURSOR)
            output.flush()
        except (OSError, ValueError) as exc:
            # Stream already broken or closed; a pending exception still propagates.
            logger.warning("could not restore cursor: %s", exc)
