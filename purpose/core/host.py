"""
Host — The editor environment window-purpose runs inside

The core never owns buffers or windows. It reads them through the Host
interface:
- Buffer enumeration, lookup by name, create-if-absent, liveness
- Major-mode derivation
- Window enumeration and directional neighbour queries
- Window buffer, minibuffer predicate, window-local parameters
- The host's own buffer-dedication flag and indicator refresh

Buffer and Window are plain handles. Hosts may subclass them or keep
their own state keyed by them; MemoryHost (see layout.py) stores
everything on the handles directly.
"""

from abc import ABC, abstractmethod
from enum import Enum
from itertools import count
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .modes import FUNDAMENTAL_MODE, ModeTable

if TYPE_CHECKING:
    from .layout import Frame


class Direction(Enum):
    """Side of a window."""
    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def perpendicular(self) -> tuple:
        """The two sides across this direction's axis."""
        if self in (Direction.ABOVE, Direction.BELOW):
            return (Direction.LEFT, Direction.RIGHT)
        return (Direction.ABOVE, Direction.BELOW)


_OPPOSITES = {
    Direction.ABOVE: Direction.BELOW,
    Direction.BELOW: Direction.ABOVE,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Buffer:
    """Handle for a host buffer: a unique name and a major-mode tag."""

    def __init__(self, name: str, mode: str = FUNDAMENTAL_MODE):
        self.name = name
        self.mode = mode
        self.live = True

    def __repr__(self) -> str:
        state = "" if self.live else " killed"
        return f"<Buffer {self.name!r} {self.mode}{state}>"


_window_ids = count(1)


class Window:
    """
    Handle for a host window.

    `parameters` is window-local storage; it goes away with the window.
    `dedicated` is the host's own buffer-dedication flag, unrelated to
    purpose dedication.
    """

    def __init__(self, buffer: Optional[Buffer] = None, name: Optional[str] = None,
                 minibuffer: bool = False):
        self.id = next(_window_ids)
        self.name = name or f"window-{self.id}"
        self.buffer = buffer
        self.minibuffer = minibuffer
        self.parameters: Dict[str, Any] = {}
        self.dedicated = False
        self.live = True
        self.parent = None  # Split, or the Frame for a root window

    def __repr__(self) -> str:
        buffer_name = self.buffer.name if self.buffer else None
        return f"<Window {self.name} on {buffer_name!r}>"


class Host(ABC):
    """Abstract editor environment."""

    @property
    @abstractmethod
    def modes(self) -> ModeTable:
        """Major-mode derivation table."""
        pass

    # -------------------------------------------------------------------------
    # Buffers
    # -------------------------------------------------------------------------

    @abstractmethod
    def buffers(self) -> List[Buffer]:
        """All live buffers, in host order."""
        pass

    @abstractmethod
    def get_buffer(self, name: str) -> Optional[Buffer]:
        """Live buffer with this name, or None."""
        pass

    @abstractmethod
    def get_buffer_create(self, name: str, mode: str = FUNDAMENTAL_MODE) -> Buffer:
        """Live buffer with this name, created in `mode` if absent."""
        pass

    def buffer_live_p(self, buffer: Buffer) -> bool:
        return buffer.live and self.get_buffer(buffer.name) is buffer

    # -------------------------------------------------------------------------
    # Windows
    # -------------------------------------------------------------------------

    @abstractmethod
    def selected_frame(self) -> "Frame":
        pass

    @abstractmethod
    def selected_window(self) -> Window:
        pass

    @abstractmethod
    def windows(self, frame: Optional["Frame"] = None,
                include_minibuffer: bool = False) -> List[Window]:
        """
        Leaf windows of a frame in layout pre-order.

        Pre-order means a depth-first walk of the split tree, visiting
        children left-to-right / top-to-bottom.
        """
        pass

    @abstractmethod
    def window_in_direction(self, direction: Direction, window: Window) -> Optional[Window]:
        """Window adjacent to `window` on the given side, or None."""
        pass

    def window_buffer(self, window: Window) -> Buffer:
        return window.buffer

    def set_window_buffer(self, window: Window, buffer: Buffer) -> None:
        window.buffer = buffer

    def window_minibuffer_p(self, window: Window) -> bool:
        return window.minibuffer

    def window_parameter(self, window: Window, key: str, default: Any = None) -> Any:
        return window.parameters.get(key, default)

    def set_window_parameter(self, window: Window, key: str, value: Any) -> None:
        window.parameters[key] = value

    def window_dedicated_p(self, window: Window) -> bool:
        return window.dedicated

    def set_window_dedicated_p(self, window: Window, flag: bool) -> None:
        window.dedicated = bool(flag)

    def force_indicator_update(self, window: Window) -> None:
        """Ask the host to redraw any per-window indicator. No-op by default."""
        pass
