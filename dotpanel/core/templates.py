"""
Named layout templates for the panel windows.

Each template builds the widget tree of one window and returns it together
with the widgets other code looks up by name.
"""

import datetime
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gio", "2.0")
from gi.repository import Gio, GLib, Gtk  # pyright: ignore  # noqa: E402

CLOCK_SECTION = "org.dotpanel.clock"
START_MENU_SECTION = "org.dotpanel.start_menu"

Widgets = Dict[str, Gtk.Widget]


@dataclass
class TemplateContext:
    config_handler: Any
    gtk_helpers: Any
    logger: Any


def build_panel(ctx: TemplateContext) -> Tuple[Gtk.Widget, Widgets]:
    """Dock bar: start button on the left, clock/calendar button on the right."""
    bar = Gtk.CenterBox()
    bar.add_css_class("panel-bar")
    open_start_menu = Gtk.Button()
    open_start_menu.set_icon_name(
        ctx.config_handler.get_root_setting(
            [START_MENU_SECTION, "icon"], "start-here-symbolic"
        )
    )
    open_start_menu.add_css_class("flat")
    open_start_menu.add_css_class("open-start-menu")
    clock_label = Gtk.Label()
    clock_label.add_css_class("clock-label")
    open_calendar = Gtk.Button()
    open_calendar.set_child(clock_label)
    open_calendar.add_css_class("flat")
    open_calendar.add_css_class("open-calendar")
    for button in (open_start_menu, open_calendar):
        ctx.gtk_helpers.add_cursor_effect(button)
    bar.set_start_widget(open_start_menu)
    bar.set_end_widget(open_calendar)
    ClockUpdater(
        clock_label,
        ctx.config_handler.get_root_setting([CLOCK_SECTION, "format"], "%H:%M"),
        ctx.logger,
    ).start()
    return bar, {
        "open_start_menu": open_start_menu,
        "open_calendar": open_calendar,
        "clock_label": clock_label,
    }


def build_start_menu(ctx: TemplateContext) -> Tuple[Gtk.Widget, Widgets]:
    """
    Application list. Entries come from the installed desktop files, so the
    natural height of this window is only known once the list is filled.
    """
    box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
    box.add_css_class("start-menu")
    app_list = Gtk.ListBox()
    app_list.set_selection_mode(Gtk.SelectionMode.NONE)
    app_list.add_css_class("start-menu-list")
    max_entries = ctx.config_handler.get_int_setting(
        [START_MENU_SECTION, "max_entries"], 12
    )
    apps = sorted(
        (app for app in Gio.AppInfo.get_all() if app.should_show()),
        key=lambda app: app.get_display_name().lower(),
    )[:max_entries]
    rows = {}
    for app in apps:
        row = Gtk.ListBoxRow()
        row_box = Gtk.Box.new(Gtk.Orientation.HORIZONTAL, 6)
        icon = app.get_icon()
        if icon is not None:
            image = Gtk.Image.new_from_gicon(icon)
            image.add_css_class("start-menu-icon")
            row_box.append(image)
        label = Gtk.Label.new(app.get_display_name())
        label.set_halign(Gtk.Align.START)
        label.add_css_class("start-menu-label")
        row_box.append(label)
        row.set_child(row_box)
        rows[row] = app
        app_list.append(row)

    def launch(_list_box, row):
        app = rows.get(row)
        if app is None:
            return
        try:
            app.launch([], None)
            ctx.logger.info(f"Launched {app.get_id()}")
        except GLib.Error as e:
            ctx.logger.error(f"Failed to launch {app.get_id()}: {e.message}")

    app_list.connect("row-activated", launch)
    box.append(app_list)
    ctx.logger.debug(f"Start menu filled with {len(apps)} applications.")
    return box, {"start_menu_list": app_list}


def build_calendar(ctx: TemplateContext) -> Tuple[Gtk.Widget, Widgets]:
    container = Gtk.Grid()
    container.set_row_spacing(2)
    container.set_column_spacing(2)
    container.set_margin_top(8)
    container.set_margin_bottom(8)
    container.set_margin_start(8)
    container.set_margin_end(8)
    container.add_css_class("calendar-container")
    return container, {"calendar_container": container}


class ClockUpdater:
    """Keeps a label showing the current time, refreshed at each new minute."""

    def __init__(self, label: Gtk.Label, time_format: str, logger: Any):
        self.label = label
        self.time_format = time_format
        self.logger = logger

    def start(self):
        self.update_clock()
        self.schedule_next_update()

    def update_clock(self):
        try:
            self.label.set_label(datetime.datetime.now().strftime(self.time_format))
        except ValueError as e:
            self.logger.error(f"Error updating clock: {e}")

    def schedule_next_update(self):
        seconds_until_next_minute = 60 - datetime.datetime.now().second
        GLib.timeout_add_seconds(seconds_until_next_minute, self._update_and_reschedule)

    def _update_and_reschedule(self):
        self.update_clock()
        self.schedule_next_update()
        return False


TEMPLATES: Dict[str, Callable[[TemplateContext], Tuple[Gtk.Widget, Widgets]]] = {
    "panel": build_panel,
    "start_menu": build_start_menu,
    "calendar": build_calendar,
}
