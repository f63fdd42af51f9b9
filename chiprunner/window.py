"""Window geometry state: fullscreen toggling and aspect-locked resizing."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "DirectXGame"


class SizeChangeMode(enum.Enum):
    """How the user may resize the window."""

    NONE = 0
    NORMAL = 1
    FIXED_ASPECT = 2


class SizingEdge(enum.IntEnum):
    """Edge or corner being dragged during a resize."""

    LEFT = 1
    RIGHT = 2
    TOP = 3
    TOP_LEFT = 4
    TOP_RIGHT = 5
    BOTTOM = 6
    BOTTOM_LEFT = 7
    BOTTOM_RIGHT = 8


@dataclass(frozen=True)
class WindowRect:
    """Integer rectangle in screen coordinates."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


def fix_aspect(rect: WindowRect, edge: SizingEdge, aspect_ratio: float) -> WindowRect:
    """Adjust a rectangle being resized from ``edge`` so it keeps ``aspect_ratio``."""
    if not aspect_ratio > 0.0:
        raise ValueError("aspect_ratio must be positive")
    edge = SizingEdge(edge)
    reciprocal = 1.0 / aspect_ratio
    if edge in (SizingEdge.LEFT, SizingEdge.BOTTOM_LEFT, SizingEdge.RIGHT, SizingEdge.BOTTOM_RIGHT):
        return replace(rect, bottom=rect.top + int(rect.width * reciprocal))
    if edge in (SizingEdge.TOP, SizingEdge.TOP_RIGHT, SizingEdge.BOTTOM):
        return replace(rect, right=rect.left + int(rect.height * aspect_ratio))
    top = rect.bottom - int(rect.width * reciprocal)
    left = rect.right - int((rect.bottom - top) * aspect_ratio)
    return replace(rect, top=top, left=left)


@dataclass
class WindowState:
    """Geometry and style of the game window."""

    title: str = WINDOW_TITLE
    client_width: int = WINDOW_WIDTH
    client_height: int = WINDOW_HEIGHT
    rect: WindowRect = field(init=False)
    aspect_ratio: float = field(init=False)
    size_change_mode: SizeChangeMode = field(default=SizeChangeMode.NORMAL, init=False)
    resizable: bool = field(default=True, init=False)
    decorated: bool = field(default=True, init=False)
    topmost: bool = field(default=False, init=False)
    is_fullscreen: bool = field(default=False, init=False)
    saved_rect: Optional[WindowRect] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.client_width <= 0 or self.client_height <= 0:
            raise ValueError("client size must be positive")
        self.aspect_ratio = self.client_width / self.client_height
        self.rect = WindowRect(0, 0, self.client_width, self.client_height)

    def set_fullscreen(self, fullscreen: bool, monitor_rect: WindowRect) -> None:
        """Switch between a borderless monitor-sized window and the saved one."""
        if self.is_fullscreen != fullscreen:
            if fullscreen:
                self.saved_rect = self.rect
                self.decorated = False
                self.topmost = True
                self.rect = WindowRect(0, 0, monitor_rect.width, monitor_rect.height)
            else:
                self.decorated = True
                self.topmost = False
                if self.saved_rect is not None:
                    self.rect = self.saved_rect
        self.is_fullscreen = fullscreen

    def set_size_change_mode(
        self, mode: SizeChangeMode, client_width: int, client_height: int
    ) -> None:
        """Change the resize policy; a fixed aspect keeps the current client ratio."""
        mode = SizeChangeMode(mode)
        if mode is SizeChangeMode.NONE:
            self.resizable = False
        else:
            if mode is SizeChangeMode.FIXED_ASPECT:
                if client_width <= 0 or client_height <= 0:
                    raise ValueError("client size must be positive")
                self.aspect_ratio = client_width / client_height
            self.resizable = True
        self.size_change_mode = mode

    def on_sizing(self, rect: WindowRect, edge: SizingEdge) -> WindowRect:
        """Return the rectangle a resize drag should actually produce."""
        if self.size_change_mode is SizeChangeMode.FIXED_ASPECT:
            return fix_aspect(rect, edge, self.aspect_ratio)
        return rect