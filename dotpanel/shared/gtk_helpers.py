import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
gi.require_version("Gio", "2.0")

from gi.repository import Gtk, Gdk, Gio  # pyright: ignore  # noqa: E402
from typing import Any, Iterable  # noqa: E402


class GtkHelpers:
    def __init__(self, panel_instance):
        self.logger = panel_instance.logger
        self._css_loaded = False

    def load_css_from_files(self, css_paths: Iterable[Any]) -> None:
        """
        Register the given stylesheets for the default display. Runs once per
        process; later calls are ignored.
        """
        if self._css_loaded:
            return
        display = Gdk.Display.get_default()
        if display is None:
            self.logger.warning("No default display, skipping stylesheet loading.")
            return
        for priority_offset, path in enumerate(css_paths):
            css_provider = Gtk.CssProvider()
            css_provider.connect("parsing-error", self._on_css_parsing_error, path)
            css_provider.load_from_file(Gio.File.new_for_path(str(path)))
            Gtk.StyleContext.add_provider_for_display(
                display,
                css_provider,
                Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION + priority_offset,
            )
            self.logger.debug(f"Loaded stylesheet {path}")
        self._css_loaded = True

    def _on_css_parsing_error(self, provider, section, error, path):
        self.logger.error(
            f"Error in stylesheet {path} at {section.to_string()}: {error.message}"
        )

    def add_cursor_effect(self, widget):
        motion = Gtk.EventControllerMotion()
        motion.connect(
            "enter",
            lambda c, x, y: widget.set_cursor(
                Gdk.Cursor.new_from_name("pointer", None)
            ),
        )
        motion.connect(
            "leave",
            lambda c: widget.set_cursor(None),
        )
        widget.add_controller(motion)
