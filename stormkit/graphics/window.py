"""Window display modes and window settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class Windowed:
    """Normal windowed mode of the given size."""

    width: int
    height: int
    resizable: bool


@dataclass(frozen=True)
class WindowedFullscreen:
    """"Fake" fullscreen that takes the size of the desktop."""


@dataclass(frozen=True)
class Fullscreen:
    """"Real" fullscreen with a video mode change."""


DisplayMode = Union[Windowed, WindowedFullscreen, Fullscreen]


class Vsync(Enum):
    """Vertical synchronisation setting."""

    DISABLED = "disabled"
    ENABLED = "enabled"


@dataclass
class WindowSettings:
    """Configuration of the window: title, display mode and vsync."""

    title: str = "Storm Engine"
    display_mode: DisplayMode = field(default_factory=lambda: Windowed(500, 500, True))
    vsync: Vsync = Vsync.DISABLED