"""
Dedication — Purpose-dedicated windows

A purpose-dedicated window should keep showing buffers of its current
purpose. The flag is a window parameter, so it lives and dies with the
window.

This is separate from the host's own buffer dedication (a window
dedicated to one specific buffer). Both can be toggled here, but they
never share state.
"""

import logging
from typing import Optional

from .host import Host, Window

logger = logging.getLogger(__name__)

DEDICATED_PARAMETER = "purpose-dedicated"


class DedicationStore:
    """Get, set and toggle purpose dedication through window parameters."""

    def __init__(self, host: Host):
        self.host = host

    def _window(self, window: Optional[Window]) -> Window:
        return window or self.host.selected_window()

    def is_dedicated(self, window: Optional[Window] = None) -> bool:
        return bool(self.host.window_parameter(self._window(window), DEDICATED_PARAMETER, False))

    def set_dedicated(self, window: Optional[Window], flag: bool) -> None:
        self.host.set_window_parameter(self._window(window), DEDICATED_PARAMETER, bool(flag))

    def toggle_dedicated(self, window: Optional[Window] = None) -> bool:
        """Flip purpose dedication, refresh the host indicator, return the new value."""
        window = self._window(window)
        flag = not self.is_dedicated(window)
        self.set_dedicated(window, flag)
        self.host.force_indicator_update(window)
        logger.info("Window %s %s its purpose", window.name,
                    "dedicated to" if flag else "un-dedicated from")
        return flag

    def toggle_buffer_dedicated(self, window: Optional[Window] = None) -> bool:
        """Flip the host's buffer dedication, refresh the indicator, return the new value."""
        window = self._window(window)
        flag = not self.host.window_dedicated_p(window)
        self.host.set_window_dedicated_p(window, flag)
        self.host.force_indicator_update(window)
        logger.info("Window %s %s its buffer", window.name,
                    "dedicated to" if flag else "un-dedicated from")
        return flag
