"""
Screen placement of the panel windows.

Every rule takes the primary display geometry and, for the popups, the
natural size the window reported once it was realized. Nothing here talks
to the toolkit; the orchestrator applies the resulting rectangles.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

DEFAULT_PADDING = 8
DEFAULT_BAR_HEIGHT = 16
DEFAULT_BAR_OFFSET = 32
START_MENU_HEIGHT_FACTOR = 2
CALENDAR_PADDING_FACTOR = 5
GEOMETRY_SECTION = ["org.dotpanel.panel", "geometry"]


@dataclass(frozen=True)
class DisplayGeometry:
    """Work area of the primary display. Its top edge is taken as y = 0."""

    x: int
    width: int
    height: int


@dataclass(frozen=True)
class WindowSize:
    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    """Target position of a window; a missing dimension is left to the content."""

    x: int
    y: int
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def has_size(self) -> bool:
        return self.width is not None and self.height is not None


@dataclass(frozen=True)
class PlacementSettings:
    padding: int = DEFAULT_PADDING
    bar_height: int = DEFAULT_BAR_HEIGHT
    bar_offset: int = DEFAULT_BAR_OFFSET

    @classmethod
    def from_config(cls, config_handler: Any) -> "PlacementSettings":
        """Read the geometry section, falling back to the built-in values."""

        def setting(key, default):
            return config_handler.get_int_setting(GEOMETRY_SECTION + [key], default)

        return cls(
            padding=setting("padding", DEFAULT_PADDING),
            bar_height=setting("bar_height", DEFAULT_BAR_HEIGHT),
            bar_offset=setting("bar_offset", DEFAULT_BAR_OFFSET),
        )


def layer_margins(rect: Rect, display: Optional[DisplayGeometry]) -> Tuple[int, int]:
    """
    Left and top margins that put a window anchored to the top-left corner of
    its monitor at `rect`. The rectangle is in desktop coordinates; margins
    are measured from the monitor origin.
    """
    if display is None:
        return rect.x, rect.y
    return rect.x - display.x, rect.y


class PlacementEngine:
    def __init__(self, settings: Optional[PlacementSettings] = None):
        self.settings = settings or PlacementSettings()

    def main_bar(self, display: DisplayGeometry) -> Rect:
        s = self.settings
        return Rect(
            x=display.x + s.padding,
            y=display.height - s.bar_height - s.bar_offset,
            width=display.width - s.padding * 2,
            height=s.bar_height,
        )

    def start_menu(self, display: DisplayGeometry, size: WindowSize) -> Rect:
        s = self.settings
        return Rect(
            x=display.x + s.padding,
            y=display.height
            - s.bar_height
            - size.height * START_MENU_HEIGHT_FACTOR
            - s.padding,
        )

    def calendar_popup(self, display: DisplayGeometry, size: WindowSize) -> Rect:
        # only the primary display is considered, so display.x is not applied
        s = self.settings
        return Rect(
            x=display.width - s.padding - size.width,
            y=display.height
            - s.bar_height
            - size.height
            - s.padding * CALENDAR_PADDING_FACTOR,
        )
