"""Session bridge: forwards a launch-supplied capture id to the UI.

A second launch of the single-instance app hands its arguments to the running
instance and refocuses the window, so the id is checked at startup and again
each time the window becomes focused.
"""

import logging
import sys
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

CAPTURE_ID_FLAG = "--capture-id="
CAPTURE_ID_EVENT = "capture-id"

Emitter = Callable[[str, str], None]


def extract_capture_id(argv: Sequence[str]) -> Optional[str]:
    """Return the first non-empty --capture-id=<value> argument, if any."""
    for arg in argv:
        if arg.startswith(CAPTURE_ID_FLAG):
            value = arg[len(CAPTURE_ID_FLAG):]
            if value:
                return value
    return None


class SessionBridge:
    """Emits capture-id notifications on startup and window focus."""

    def __init__(self, emit: Emitter, argv: Optional[Sequence[str]] = None):
        """Initialize the bridge.

        Args:
            emit: Callback taking (event_name, payload)
            argv: Launch arguments; defaults to sys.argv
        """
        self.emit = emit
        self.argv = list(argv) if argv is not None else list(sys.argv)
        self._focused = False

    def forward_launch_args(self, argv: Sequence[str]) -> None:
        """Replace the arguments checked on the next focus (second launch)."""
        self.argv = list(argv)

    def on_startup(self) -> Optional[str]:
        return self._check()

    def on_window_focus(self, focused: bool) -> Optional[str]:
        """Handle a window focus change; only unfocused -> focused checks."""
        was_focused = self._focused
        self._focused = focused
        if not focused or was_focused:
            return None
        return self._check()

    def _check(self) -> Optional[str]:
        capture_id = extract_capture_id(self.argv)
        if capture_id is None:
            return None

        try:
            self.emit(CAPTURE_ID_EVENT, capture_id)
        except Exception as e:
            logger.error(f"Failed to emit {CAPTURE_ID_EVENT} event: {e}")
        return capture_id
