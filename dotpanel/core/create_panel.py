from typing import Any, Dict, Optional

import gi

gi.require_version("Adw", "1")
gi.require_version("Gtk4LayerShell", "1.0")
gi.require_version("Gdk", "4.0")
gi.require_version("Gtk", "4.0")
from gi.repository import Adw, Gdk, Gtk  # pyright: ignore  # noqa: E402
from gi.repository import Gtk4LayerShell as LayerShell  # pyright: ignore  # noqa: E402

from dotpanel.core.calendar_grid import CalendarGrid  # noqa: E402
from dotpanel.core.errors import (  # noqa: E402
    DisplayUnavailableError,
    TemplateNotFoundError,
    WidgetNotFoundError,
)
from dotpanel.core.placement import (  # noqa: E402
    DisplayGeometry,
    Rect,
    WindowSize,
    layer_margins,
)
from dotpanel.core.templates import TEMPLATES, TemplateContext  # noqa: E402
from dotpanel.core.window import ClickCallback, Toolkit, WindowHandle  # noqa: E402

PANEL_SECTION = "org.dotpanel.panel"
DEFAULT_LAYERS = {"panel": "TOP", "start_menu": "OVERLAY", "calendar": "OVERLAY"}
LAYER_KEYS = {"panel": "main_bar", "start_menu": "start_menu", "calendar": "calendar"}


def get_monitor_info() -> Dict[str, Gdk.Monitor]:
    """
    Connected monitors keyed by connector name, in the order GDK lists them.
    """
    screen: Optional[Gdk.Display] = Gdk.Display.get_default()
    monitor_info: Dict[str, Gdk.Monitor] = {}
    if screen:
        for monitor in screen.get_monitors():
            name: str = monitor.props.connector or f"monitor-{len(monitor_info)}"
            monitor_info[name] = monitor
    return monitor_info


def get_target_monitor(
    monitors: Dict[str, Gdk.Monitor], primary_output_name: Optional[str]
) -> Optional[Gdk.Monitor]:
    """The configured primary output if connected, otherwise the first monitor."""
    if primary_output_name and primary_output_name in monitors:
        return monitors[primary_output_name]
    return next(iter(monitors.values()), None)


def setup_layer_shell(
    window: Adw.Window,
    layer: str,
    monitor: Optional[Gdk.Monitor],
    class_style: str,
) -> None:
    """
    Configure the GTK Layer Shell properties for the window. Windows are
    anchored to the top-left corner of the monitor so that margins act as
    monitor coordinates.
    """
    LayerShell.init_for_window(window)
    LayerShell.set_namespace(window, "dotpanel")
    if monitor is not None:
        LayerShell.set_monitor(window, monitor)
    layer = layer.upper()
    if layer in ("BACKGROUND", "BOTTOM", "TOP", "OVERLAY"):
        LayerShell.set_layer(window, getattr(LayerShell.Layer, layer))
    else:
        LayerShell.set_layer(window, LayerShell.Layer.TOP)
    LayerShell.set_anchor(window, LayerShell.Edge.TOP, True)
    LayerShell.set_anchor(window, LayerShell.Edge.LEFT, True)
    LayerShell.set_keyboard_mode(window, LayerShell.KeyboardMode.NONE)
    window.add_css_class(class_style)


class GtkWindowHandle(WindowHandle):
    def __init__(
        self,
        name: str,
        window: Adw.Window,
        widgets: Dict[str, Gtk.Widget],
        toolkit: "GtkToolkit",
    ):
        self.name = name
        self.window = window
        self.widgets = widgets
        self.toolkit = toolkit
        self._size = WindowSize(0, 0)

    def realize(self) -> WindowSize:
        self.window.present()
        _, natural_width, _, _ = self.window.measure(Gtk.Orientation.HORIZONTAL, -1)
        _, natural_height, _, _ = self.window.measure(
            Gtk.Orientation.VERTICAL, natural_width
        )
        self._size = WindowSize(natural_width, natural_height)
        return self._size

    def place(self, rect: Rect) -> None:
        left, top = layer_margins(rect, self.toolkit.display)
        LayerShell.set_margin(self.window, LayerShell.Edge.LEFT, left)
        LayerShell.set_margin(self.window, LayerShell.Edge.TOP, top)
        if rect.has_size:
            self.window.set_default_size(rect.width, rect.height)
            self.window.set_size_request(rect.width, rect.height)
            self._size = WindowSize(rect.width, rect.height)  # pyright: ignore

    def show(self) -> None:
        self.window.present()

    def set_visible(self, visible: bool) -> None:
        self.window.set_visible(visible)

    def is_visible(self) -> bool:
        return self.window.get_visible()

    def get_size(self) -> WindowSize:
        width, height = self.window.get_width(), self.window.get_height()
        if width > 0 and height > 0:
            return WindowSize(width, height)
        return self._size

    def require_widget(self, widget_name: str) -> Gtk.Widget:
        widget = self.widgets.get(widget_name)
        if widget is None:
            raise WidgetNotFoundError(self.name, widget_name)
        return widget

    def on_click(self, widget_name: str, callback: ClickCallback) -> None:
        self.require_widget(widget_name).connect("clicked", callback)

    def render_calendar(self, container_name: str, grid: CalendarGrid) -> None:
        container = self.require_widget(container_name)
        for i, week in enumerate(grid):
            for j, cell in enumerate(week):
                label = Gtk.Label(label=cell.label)
                aspect_frame = Gtk.AspectFrame(
                    xalign=0.5, yalign=0.5, ratio=1.0, obey_child=False
                )
                aspect_frame.set_child(label)
                aspect_frame.add_css_class("flat")
                if i == 0:
                    label.add_css_class("calendar-header")
                if cell.is_today:
                    label.add_css_class("calendar-today")
                container.attach(aspect_frame, j, i, 1, 1)


class GtkToolkit(Toolkit):
    """Creates layer-shell windows from the registered templates."""

    def __init__(self, app: Adw.Application, config_handler: Any, gtk_helpers: Any, logger: Any):
        self.app = app
        self.config_handler = config_handler
        self.logger = logger
        self.context = TemplateContext(config_handler, gtk_helpers, logger)
        self.display: Optional[DisplayGeometry] = None
        self.primary_output_name = config_handler.get_root_setting(
            [PANEL_SECTION, "primary_output", "name"], ""
        )
        if not LayerShell.is_supported():
            self.logger.warning(
                "gtk4-layer-shell is not supported by this compositor; "
                "window placement will be ignored."
            )

    def create_window(self, template_name: str) -> GtkWindowHandle:
        build = TEMPLATES.get(template_name)
        if build is None:
            raise TemplateNotFoundError(template_name)
        window = Adw.Window(application=self.app)
        window.set_decorated(False)
        window.set_focus_on_click(False)
        content, widgets = build(self.context)
        window.set_content(content)
        layer = self.config_handler.get_root_setting(
            [PANEL_SECTION, "layers", LAYER_KEYS[template_name]],
            DEFAULT_LAYERS[template_name],
        )
        setup_layer_shell(
            window=window,
            layer=layer,
            monitor=get_target_monitor(get_monitor_info(), self.primary_output_name),
            class_style=template_name.replace("_", "-"),
        )
        self.logger.debug(f"Created window from template '{template_name}'.")
        return GtkWindowHandle(template_name, window, widgets, self)

    def query_primary_display(self) -> DisplayGeometry:
        monitors = get_monitor_info()
        monitor = get_target_monitor(monitors, self.primary_output_name)
        if monitor is None:
            raise DisplayUnavailableError("No monitor is connected to the display.")
        if self.primary_output_name and self.primary_output_name not in monitors:
            self.logger.warning(
                f"Configured monitor '{self.primary_output_name}' not found. Falling back to default."
            )
        geometry = monitor.get_geometry()
        self.display = DisplayGeometry(
            x=int(geometry.x), width=int(geometry.width), height=int(geometry.height)
        )
        return self.display
