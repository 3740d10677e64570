import logging
from types import SimpleNamespace

import pytest

from dotpanel.core.errors import (
    DisplayUnavailableError,
    TemplateNotFoundError,
    WidgetNotFoundError,
)
from dotpanel.core.placement import DisplayGeometry, WindowSize
from dotpanel.core.window import Toolkit, WindowHandle

FULL_HD = DisplayGeometry(x=0, width=1920, height=1080)

TEMPLATE_WIDGETS = {
    "panel": ("open_start_menu", "open_calendar"),
    "start_menu": ("start_menu_list",),
    "calendar": ("calendar_container",),
}


class FakeButton:
    def __init__(self):
        self.callbacks = []

    def click(self):
        for callback in self.callbacks:
            callback(self)


class FakeWindow(WindowHandle):
    """Records every toolkit call made against it in a shared event log."""

    def __init__(self, name, natural_size, widgets, events):
        self.name = name
        self.natural_size = natural_size
        self.widgets = widgets
        self.events = events
        self.visible = False
        self.shown = False
        self.rect = None
        self.calendar = None

    def realize(self):
        self.events.append(("realize", self.name))
        self.visible = True
        self.shown = True
        return self.natural_size

    def place(self, rect):
        self.events.append(("place", self.name))
        self.rect = rect

    def show(self):
        self.events.append(("show", self.name))
        self.visible = True
        self.shown = True

    def set_visible(self, visible):
        self.events.append(("set_visible", self.name, visible))
        self.visible = visible

    def is_visible(self):
        return self.visible

    def get_size(self):
        if self.rect is not None and self.rect.has_size:
            return WindowSize(self.rect.width, self.rect.height)
        return self.natural_size

    def require_widget(self, widget_name):
        if widget_name not in self.widgets:
            raise WidgetNotFoundError(self.name, widget_name)
        return self.widgets[widget_name]

    def on_click(self, widget_name, callback):
        self.require_widget(widget_name).callbacks.append(callback)

    def render_calendar(self, container_name, grid):
        self.require_widget(container_name)
        self.calendar = grid


class FakeToolkit(Toolkit):
    def __init__(self, display=FULL_HD, sizes=None, templates=None):
        self.display = display
        self.sizes = sizes or {
            "panel": WindowSize(1904, 16),
            "start_menu": WindowSize(240, 300),
            "calendar": WindowSize(210, 180),
        }
        self.templates = TEMPLATE_WIDGETS if templates is None else templates
        self.events = []
        self.windows = {}

    def create_window(self, template_name):
        if template_name not in self.templates:
            raise TemplateNotFoundError(template_name)
        widgets = {name: FakeButton() for name in self.templates[template_name]}
        window = FakeWindow(
            template_name, self.sizes[template_name], widgets, self.events
        )
        self.windows[template_name] = window
        return window

    def query_primary_display(self):
        self.events.append(("query_display",))
        if self.display is None:
            raise DisplayUnavailableError("no monitor")
        return self.display


@pytest.fixture
def toolkit():
    return FakeToolkit()


@pytest.fixture
def panel_instance():
    return SimpleNamespace(logger=logging.getLogger("dotpanel.tests"))


@pytest.fixture
def xdg_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return tmp_path
