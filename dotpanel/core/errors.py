class PanelError(Exception):
    """Base class for every error raised by dotpanel."""


class FatalStartupError(PanelError):
    """
    Raised while the panel is being assembled. Nothing has been shown yet
    when one of these propagates, and the application must not continue.
    """


class DisplayUnavailableError(FatalStartupError):
    """No primary display could be queried."""


class TemplateNotFoundError(FatalStartupError):
    """A window was requested from a layout template that does not exist."""

    def __init__(self, template_name: str):
        super().__init__(f"Window template not found: {template_name!r}")
        self.template_name = template_name


class WidgetNotFoundError(FatalStartupError):
    """A named widget is missing from a window built from a template."""

    def __init__(self, window_name: str, widget_name: str):
        super().__init__(
            f"Widget {widget_name!r} not found in window {window_name!r}"
        )
        self.window_name = window_name
        self.widget_name = widget_name


class CalendarGridError(PanelError, ValueError):
    """Raised when a calendar grid is requested for an impossible period."""
