"""
Toolkit boundary used by the panel orchestrator.

The orchestrator only ever sees these two abstractions, so the calendar and
placement logic can be exercised without a running display. The GTK
implementation lives in ``dotpanel.core.create_panel``.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from dotpanel.core.calendar_grid import CalendarGrid
from dotpanel.core.placement import DisplayGeometry, Rect, WindowSize

ClickCallback = Callable[..., Any]


class WindowHandle(ABC):
    name: str

    @abstractmethod
    def realize(self) -> WindowSize:
        """Show the window so its content is laid out and return its natural size."""

    @abstractmethod
    def place(self, rect: Rect) -> None:
        """Move the window to ``rect`` and, when it carries a size, resize it."""

    @abstractmethod
    def show(self) -> None: ...

    @abstractmethod
    def set_visible(self, visible: bool) -> None: ...

    def hide(self) -> None:
        self.set_visible(False)

    @abstractmethod
    def is_visible(self) -> bool: ...

    @abstractmethod
    def get_size(self) -> WindowSize: ...

    @abstractmethod
    def require_widget(self, widget_name: str) -> Any:
        """Return a named widget or raise ``WidgetNotFoundError``."""

    @abstractmethod
    def on_click(self, widget_name: str, callback: ClickCallback) -> None: ...

    @abstractmethod
    def render_calendar(self, container_name: str, grid: CalendarGrid) -> None: ...


class Toolkit(ABC):
    @abstractmethod
    def create_window(self, template_name: str) -> WindowHandle:
        """Build a window from a named layout template or raise ``TemplateNotFoundError``."""

    @abstractmethod
    def query_primary_display(self) -> DisplayGeometry:
        """Geometry of the primary display or ``DisplayUnavailableError``."""
