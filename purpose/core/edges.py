"""
Edges — Windows that span a whole side of the frame

The top window of a frame is the window that:
- has nothing to its left or right (it spans the full width)
- has nothing above it
- has something below it

Bottom, left and right are the same test with the sides rotated. A
frame holding a single window touches every edge, so that window is
the top, bottom, left and right window at once.

Leaves are visited once in layout pre-order. A well-formed tiling
has at most one qualifying window per side; if several qualify, the
last one visited is returned.
"""

from typing import TYPE_CHECKING, List, Optional

from .host import Direction, Host, Window

if TYPE_CHECKING:
    from .layout import Frame


class EdgeLocator:
    """Edge-window queries over a host's directional neighbour lookups."""

    def __init__(self, host: Host):
        self.host = host

    def _qualifies(self, window: Window, side: Direction, sole: bool) -> bool:
        if sole:
            return True
        in_direction = self.host.window_in_direction
        if any(in_direction(d, window) is not None for d in side.perpendicular):
            return False
        if in_direction(side, window) is not None:
            return False
        return in_direction(side.opposite, window) is not None

    def edge_window(self, side: Direction, frame: Optional["Frame"] = None) -> Optional[Window]:
        """The window spanning the frame along `side`, or None."""
        side = Direction(side)
        windows: List[Window] = [w for w in self.host.windows(frame)
                                 if not self.host.window_minibuffer_p(w)]
        sole = len(windows) == 1
        found = None
        for window in windows:
            if self._qualifies(window, side, sole):
                found = window
        return found

    def top_window(self, frame: Optional["Frame"] = None) -> Optional[Window]:
        return self.edge_window(Direction.ABOVE, frame)

    def bottom_window(self, frame: Optional["Frame"] = None) -> Optional[Window]:
        return self.edge_window(Direction.BELOW, frame)

    def left_window(self, frame: Optional["Frame"] = None) -> Optional[Window]:
        return self.edge_window(Direction.LEFT, frame)

    def right_window(self, frame: Optional["Frame"] = None) -> Optional[Window]:
        return self.edge_window(Direction.RIGHT, frame)
