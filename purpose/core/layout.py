"""
Layout — Window split trees and an in-memory host

A frame's windows form a tree:
- Leaves are windows
- Internal nodes are splits, either HORIZONTAL (children side by side)
  or VERTICAL (children stacked)

Children tile their parent's rectangle exactly. Geometry is computed
on demand from the tree and the frame size, in integer cells, so
adjacency questions ("what is above this window?") are answered by
comparing edges.

MemoryHost implements the Host interface over these frames. It is
what the CLI uses to evaluate layout files and what the tests use
as a fixture.
"""

import logging
from collections import OrderedDict
from enum import Enum
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Union

from ..errors import LayoutError
from .dedication import DEDICATED_PARAMETER
from .host import Buffer, Direction, Host, Window
from .modes import FUNDAMENTAL_MODE, ModeTable

logger = logging.getLogger(__name__)

SCRATCH_BUFFER = "*scratch*"
MINIBUFFER_NAME = " *Minibuf-0*"


class Orientation(Enum):
    """How a split arranges its children."""
    HORIZONTAL = "horizontal"  # side by side, left to right
    VERTICAL = "vertical"      # stacked, top to bottom


class Rect(NamedTuple):
    """Window edges in cells. right/bottom are exclusive."""
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


class Split:
    """Internal layout node."""

    def __init__(self, orientation: Orientation, children: List["Node"],
                 weights: Optional[List[float]] = None):
        if len(children) < 2:
            raise LayoutError("A split needs at least two children")
        if weights is None:
            weights = [1.0] * len(children)
        try:
            weights = [float(w) for w in weights]
        except (TypeError, ValueError):
            raise LayoutError(f"Split weights must be numbers: {weights!r}")
        if len(weights) != len(children):
            raise LayoutError("Split weights must match its children")
        if any(w <= 0 for w in weights):
            raise LayoutError("Split weights must be positive")
        self.orientation = Orientation(orientation)
        self.children: List[Node] = list(children)
        self.weights: List[float] = weights
        self.parent = None
        for child in self.children:
            child.parent = self

    def __repr__(self) -> str:
        return f"<Split {self.orientation.value} {self.children!r}>"


Node = Union[Window, Split]


def _allocate(start: int, length: int, weights: List[float]) -> List[tuple]:
    """Cut [start, start+length) into spans proportional to weights."""
    total = sum(weights)
    spans = []
    cumulative = 0.0
    previous = start
    for i, weight in enumerate(weights):
        cumulative += weight
        if i == len(weights) - 1:
            boundary = start + length
        else:
            boundary = start + int(length * cumulative / total)
        if boundary <= previous:
            raise LayoutError(f"Frame too small to hold {len(weights)} windows in {length} cells")
        spans.append((previous, boundary))
        previous = boundary
    return spans


class Frame:
    """A top-level layout: a root node, its size, and a minibuffer window."""

    def __init__(self, root: Node, width: int = 80, height: int = 24,
                 name: str = "F1", minibuffer: Optional[Window] = None):
        if width < 1 or height < 1:
            raise LayoutError(f"Invalid frame size {width}x{height}")
        self.name = name
        self.width = width
        self.height = height
        self.root: Node = root
        root.parent = self
        self.minibuffer = minibuffer
        if minibuffer is not None:
            minibuffer.minibuffer = True
            minibuffer.parent = self

    def leaves(self) -> List[Window]:
        """Windows in pre-order: depth first, left-to-right / top-to-bottom."""
        result: List[Window] = []
        stack: List[Node] = [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, Split):
                stack.extend(reversed(node.children))
            else:
                result.append(node)
        return result

    def edges(self) -> Dict[int, Rect]:
        """Rect of every leaf window, keyed by window id."""
        rects: Dict[int, Rect] = {}
        self._layout(self.root, Rect(0, 0, self.width, self.height), rects)
        return rects

    def _layout(self, node: Node, rect: Rect, rects: Dict[int, Rect]) -> None:
        if not isinstance(node, Split):
            rects[node.id] = rect
            return
        if node.orientation is Orientation.HORIZONTAL:
            for child, (left, right) in zip(node.children, _allocate(rect.left, rect.width, node.weights)):
                self._layout(child, Rect(left, rect.top, right, rect.bottom), rects)
        else:
            for child, (top, bottom) in zip(node.children, _allocate(rect.top, rect.height, node.weights)):
                self._layout(child, Rect(rect.left, top, rect.right, bottom), rects)

    def window_edges(self, window: Window) -> Rect:
        rects = self.edges()
        if window.id not in rects:
            raise LayoutError(f"{window!r} is not in frame {self.name}")
        return rects[window.id]

    def __repr__(self) -> str:
        return f"<Frame {self.name} {self.width}x{self.height}>"


def _touches(direction: Direction, rect: Rect, other: Rect) -> bool:
    """Is `other` directly on the `direction` side of `rect`?"""
    if direction is Direction.ABOVE:
        return other.bottom == rect.top and other.left < rect.right and other.right > rect.left
    if direction is Direction.BELOW:
        return other.top == rect.bottom and other.left < rect.right and other.right > rect.left
    if direction is Direction.LEFT:
        return other.right == rect.left and other.top < rect.bottom and other.bottom > rect.top
    return other.left == rect.right and other.top < rect.bottom and other.bottom > rect.top


def _frame_of(window: Window) -> Optional[Frame]:
    node = window
    while node is not None and not isinstance(node, Frame):
        node = node.parent
    return node


class MemoryHost(Host):
    """
    In-memory editor environment.

    Holds buffers in creation order and any number of frames. The first
    frame is created on construction with a single window on *scratch*.
    """

    def __init__(self, modes: Optional[ModeTable] = None, width: int = 80, height: int = 24):
        self._modes = modes if modes is not None else ModeTable.with_defaults()
        self._buffers: "OrderedDict[str, Buffer]" = OrderedDict()
        self._frames: List[Frame] = []
        self._selected_frame: Optional[Frame] = None
        self._selected_window: Optional[Window] = None
        self.indicator_updates: List[Window] = []

        scratch = self.get_buffer_create(SCRATCH_BUFFER, mode="lisp-interaction-mode")
        self.create_frame(Window(scratch), width=width, height=height)

    @property
    def modes(self) -> ModeTable:
        return self._modes

    # -------------------------------------------------------------------------
    # Buffers
    # -------------------------------------------------------------------------

    def buffers(self) -> List[Buffer]:
        return list(self._buffers.values())

    def get_buffer(self, name: str) -> Optional[Buffer]:
        return self._buffers.get(name)

    def get_buffer_create(self, name: str, mode: str = FUNDAMENTAL_MODE) -> Buffer:
        buffer = self._buffers.get(name)
        if buffer is None:
            buffer = Buffer(name, mode)
            self._buffers[name] = buffer
            logger.debug("Created buffer %s in %s", name, mode)
        return buffer

    def kill_buffer(self, buffer: Buffer) -> None:
        """Kill a buffer; windows showing it fall back to *scratch*."""
        if self._buffers.get(buffer.name) is not buffer:
            return
        del self._buffers[buffer.name]
        buffer.live = False
        fallback = None
        for frame in self._frames:
            for window in frame.leaves():
                if window.buffer is buffer:
                    if fallback is None:
                        fallback = self.get_buffer_create(SCRATCH_BUFFER, mode="lisp-interaction-mode")
                    window.buffer = fallback

    # -------------------------------------------------------------------------
    # Frames
    # -------------------------------------------------------------------------

    def create_frame(self, root: Optional[Node] = None, width: int = 80, height: int = 24,
                     name: Optional[str] = None) -> Frame:
        """Create a frame around a layout tree and select it."""
        if root is None:
            root = Window(self.get_buffer_create(SCRATCH_BUFFER, mode="lisp-interaction-mode"))
        minibuffer = Window(self.get_buffer_create(MINIBUFFER_NAME, mode="minibuffer-inactive-mode"),
                            name=f"minibuffer-{len(self._frames) + 1}", minibuffer=True)
        frame = Frame(root, width=width, height=height,
                      name=name or f"F{len(self._frames) + 1}", minibuffer=minibuffer)
        frame.edges()  # validate geometry up front
        self._frames.append(frame)
        self._selected_frame = frame
        self._selected_window = frame.leaves()[0]
        return frame

    def frames(self) -> List[Frame]:
        return list(self._frames)

    def selected_frame(self) -> Frame:
        return self._selected_frame

    def selected_window(self) -> Window:
        return self._selected_window

    def select_window(self, window: Window) -> None:
        frame = _frame_of(window)
        if frame is None or not window.live:
            raise LayoutError(f"{window!r} is not a live window")
        self._selected_frame = frame
        self._selected_window = window

    # -------------------------------------------------------------------------
    # Windows
    # -------------------------------------------------------------------------

    def windows(self, frame: Optional[Frame] = None,
                include_minibuffer: bool = False) -> List[Window]:
        frame = frame or self._selected_frame
        result = frame.leaves()
        if include_minibuffer and frame.minibuffer is not None:
            result.append(frame.minibuffer)
        return result

    def find_window(self, name: str, frame: Optional[Frame] = None) -> Optional[Window]:
        for window in self.windows(frame):
            if window.name == name:
                return window
        return None

    def window_in_direction(self, direction: Direction, window: Window) -> Optional[Window]:
        frame = _frame_of(window)
        if frame is None or window.minibuffer:
            return None
        rects = frame.edges()
        rect = rects[window.id]
        touching = [w for w in frame.leaves()
                    if w is not window and _touches(direction, rect, rects[w.id])]
        if not touching:
            return None
        # Prefer the neighbour facing the window's top-left corner
        for candidate in touching:
            other = rects[candidate.id]
            if direction in (Direction.ABOVE, Direction.BELOW):
                if other.left <= rect.left < other.right:
                    return candidate
            elif other.top <= rect.top < other.bottom:
                return candidate
        return touching[0]

    def force_indicator_update(self, window: Window) -> None:
        self.indicator_updates.append(window)

    def split_window(self, window: Window, side: Direction = Direction.BELOW,
                     buffer: Optional[Buffer] = None, name: Optional[str] = None) -> Window:
        """Split `window`, putting a new window on `side`. Returns the new window."""
        side = Direction(side)
        frame = _frame_of(window)
        if window.minibuffer or not window.live or frame is None:
            raise LayoutError(f"Cannot split {window!r}")
        orientation = (Orientation.VERTICAL if side in (Direction.ABOVE, Direction.BELOW)
                       else Orientation.HORIZONTAL)
        new_window = Window(buffer or window.buffer, name=name)
        before = side in (Direction.ABOVE, Direction.LEFT)
        parent = window.parent

        if isinstance(parent, Split) and parent.orientation is orientation:
            index = parent.children.index(window)
            weight = parent.weights[index]
            parent.weights[index] = weight / 2
            insert_at = index if before else index + 1
            parent.children.insert(insert_at, new_window)
            parent.weights.insert(insert_at, weight / 2)
            new_window.parent = parent
        else:
            children = [new_window, window] if before else [window, new_window]
            split = Split(orientation, children)
            self._replace_node(parent, window, split)

        try:
            frame.edges()
        except LayoutError:
            # Undo the insertion so the frame keeps its previous tiling
            if new_window.parent is parent:
                del parent.children[insert_at]
                del parent.weights[insert_at]
                parent.weights[index] = weight
            else:
                self._replace_node(parent, split, window)
            new_window.parent = None
            new_window.live = False
            raise
        return new_window

    def delete_window(self, window: Window) -> None:
        """Delete a window. Its parameters (purpose dedication included) die with it."""
        parent = window.parent
        if not isinstance(parent, Split):
            raise LayoutError(f"Cannot delete the sole window {window!r}")
        frame = _frame_of(window)
        index = parent.children.index(window)
        del parent.children[index]
        del parent.weights[index]
        if len(parent.children) == 1:
            self._replace_node(parent.parent, parent, parent.children[0])
        window.live = False
        window.parent = None
        window.parameters.clear()
        if self._selected_window is window:
            self._selected_window = frame.leaves()[0]

    def _replace_node(self, parent: Any, old: Node, new: Node) -> None:
        if isinstance(parent, Frame):
            parent.root = new
        else:
            index = parent.children.index(old)
            parent.children[index] = new
        new.parent = parent


# =============================================================================
# Layout descriptions
# =============================================================================

def frame_from_dict(host: MemoryHost, data: Mapping[str, Any]) -> Frame:
    """
    Build a frame from a layout description (as loaded from YAML).

    Format:
        frame: {width: 160, height: 48}
        buffers:
          - {name: main.py, mode: python-mode}
        layout:
          split: vertical
          children:
            - {window: top, buffer: main.py, dedicated: true}
            - {window: bottom, buffer: "*shell*"}

    Undeclared buffers are created in fundamental-mode.
    """
    if not isinstance(data, Mapping):
        raise LayoutError("Layout description must be a mapping")

    buffers = data.get("buffers") or []
    if not isinstance(buffers, list):
        raise LayoutError("'buffers' must be a list")
    for entry in buffers:
        if not isinstance(entry, Mapping) or "name" not in entry:
            raise LayoutError(f"Buffer entries need a name: {entry!r}")
        buffer = host.get_buffer_create(str(entry["name"]), mode=entry.get("mode", FUNDAMENTAL_MODE))
        if "mode" in entry:
            buffer.mode = entry["mode"]

    frame_data = data.get("frame") or {}
    if not isinstance(frame_data, Mapping):
        raise LayoutError(f"'frame' must be a mapping: {frame_data!r}")
    try:
        width = int(frame_data.get("width", 80))
        height = int(frame_data.get("height", 24))
    except (TypeError, ValueError):
        raise LayoutError(f"Frame width and height must be integers: {dict(frame_data)!r}")

    layout = data.get("layout")
    if layout is None:
        raise LayoutError("Layout description has no 'layout' section")

    root = _node_from_dict(host, layout)
    return host.create_frame(root, width=width, height=height,
                             name=frame_data.get("name"))


def _node_from_dict(host: MemoryHost, entry: Any) -> Node:
    if not isinstance(entry, Mapping):
        raise LayoutError(f"Layout node must be a mapping: {entry!r}")

    if "split" in entry:
        try:
            orientation = Orientation(entry["split"])
        except ValueError:
            raise LayoutError(f"Unknown split '{entry['split']}'. Valid: horizontal, vertical")
        children = entry.get("children") or []
        if not isinstance(children, list):
            raise LayoutError(f"Split children must be a list: {children!r}")
        children = [_node_from_dict(host, child) for child in children]
        return Split(orientation, children, entry.get("weights"))

    if "buffer" not in entry:
        raise LayoutError(f"Window entries need a buffer: {entry!r}")
    buffer = host.get_buffer_create(str(entry["buffer"]))
    window = Window(buffer, name=entry.get("window"))
    if entry.get("dedicated"):
        window.parameters[DEDICATED_PARAMETER] = True
    if entry.get("buffer_dedicated"):
        window.dedicated = True
    return window
