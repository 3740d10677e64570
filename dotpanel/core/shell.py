import datetime
from typing import Any, Dict, Optional, Tuple

import structlog

from dotpanel.core.calendar_grid import CalendarGrid, today_in_period
from dotpanel.core.placement import PlacementEngine
from dotpanel.core.toggle import PopupToggle
from dotpanel.core.window import Toolkit, WindowHandle

MAIN_BAR = "panel"
START_MENU = "start_menu"
CALENDAR = "calendar"
OPEN_START_MENU = "open_start_menu"
OPEN_CALENDAR = "open_calendar"
CALENDAR_CONTAINER = "calendar_container"
CALENDAR_SECTION = "org.dotpanel.calendar"

REQUIRED_WIDGETS: Dict[str, Tuple[str, ...]] = {
    MAIN_BAR: (OPEN_START_MENU, OPEN_CALENDAR),
    START_MENU: (),
    CALENDAR: (CALENDAR_CONTAINER,),
}


def configured_period(config_handler: Any, today: datetime.date) -> Tuple[int, int]:
    """
    Month and year shown by the calendar popup. A 0 (or an unusable value)
    in the configuration means the current month or year.
    """
    month = config_handler.get_int_setting([CALENDAR_SECTION, "month"], 0)
    year = config_handler.get_int_setting([CALENDAR_SECTION, "year"], 0)
    return month or today.month, year or today.year


class PanelShell:
    """
    Owns the three panel windows and sequences their setup.

    Every step that can fail fatally (templates, widgets, display) runs
    before the first window is shown, so a failed startup leaves nothing on
    screen.
    """

    def __init__(
        self,
        toolkit: Toolkit,
        placement: Optional[PlacementEngine] = None,
        period: Optional[Tuple[int, int]] = None,
        today: Optional[datetime.date] = None,
        logger: Any = None,
    ):
        self.toolkit = toolkit
        self.placement = placement or PlacementEngine()
        self.today = today or datetime.date.today()
        self.month, self.year = period or (self.today.month, self.today.year)
        self.logger = logger or structlog.get_logger()
        self.window: Optional[WindowHandle] = None
        self.start_menu: Optional[WindowHandle] = None
        self.calendar: Optional[WindowHandle] = None
        self.calendar_grid: Optional[CalendarGrid] = None
        self.start_menu_toggle: Optional[PopupToggle] = None
        self.calendar_toggle: Optional[PopupToggle] = None

    def setup(self) -> None:
        self.create_windows()
        self.build_calendar()
        self.pin()
        self.add_interactions()
        self.logger.info("Panel setup completed.")

    def create_windows(self) -> None:
        windows = {}
        for template_name, widget_names in REQUIRED_WIDGETS.items():
            window = self.toolkit.create_window(template_name)
            for widget_name in widget_names:
                window.require_widget(widget_name)
            windows[template_name] = window
        self.window = windows[MAIN_BAR]
        self.start_menu = windows[START_MENU]
        self.calendar = windows[CALENDAR]
        self.logger.debug("Panel windows created from templates.")

    def build_calendar(self) -> CalendarGrid:
        today_day = today_in_period(self.today, self.month, self.year)
        self.calendar_grid = CalendarGrid.build(self.month, self.year, today_day)
        self.calendar.render_calendar(CALENDAR_CONTAINER, self.calendar_grid)  # pyright: ignore
        self.logger.debug(
            f"Calendar grid built for {self.month:02d}/{self.year} "
            f"with {len(self.calendar_grid.data_weeks)} weeks."
        )
        return self.calendar_grid

    def pin(self) -> None:
        """
        Realize each window, measure it and move it into place, then hide
        the popups. The display is queried before anything is shown.
        """
        display = self.toolkit.query_primary_display()
        self.logger.info(
            f"Primary display: x={display.x} {display.width}x{display.height}"
        )
        self.window.realize()  # pyright: ignore
        self.window.place(self.placement.main_bar(display))  # pyright: ignore
        start_menu_size = self.start_menu.realize()  # pyright: ignore
        self.start_menu.place(  # pyright: ignore
            self.placement.start_menu(display, start_menu_size)
        )
        calendar_size = self.calendar.realize()  # pyright: ignore
        self.calendar.place(  # pyright: ignore
            self.placement.calendar_popup(display, calendar_size)
        )
        self.start_menu_toggle = PopupToggle(self.start_menu)  # pyright: ignore
        self.calendar_toggle = PopupToggle(self.calendar)  # pyright: ignore
        self.start_menu.hide()  # pyright: ignore
        self.calendar.hide()  # pyright: ignore

    def add_interactions(self) -> None:
        self.window.on_click(OPEN_START_MENU, self.start_menu_toggle.toggle)  # pyright: ignore
        self.window.on_click(OPEN_CALENDAR, self.calendar_toggle.toggle)  # pyright: ignore
