import datetime
import lazy_loader as lazy
from gi.repository import Adw  # pyright: ignore
from dotpanel.shared.config_handler import ConfigHandler
from dotpanel.core.errors import CalendarGridError, FatalStartupError
from dotpanel.core.placement import PlacementEngine, PlacementSettings
from dotpanel.core.shell import PanelShell, configured_period

CREATE_PANEL_MODULE = lazy.load("dotpanel.core.create_panel")
GTK_HELPERS_MODULE = lazy.load("dotpanel.shared.gtk_helpers")
PATH_HELPERS_MODULE = lazy.load("dotpanel.shared.path_handler")

FATAL_EXIT_STATUS = 1


class Panel(Adw.Application):
    def __init__(self, logger, application_id=None):
        """
        Initializes the application and loads the configuration.
        Args:
            logger: The structlog logger shared by every component.
            application_id (str): The application ID.
        """
        super().__init__(application_id=application_id)
        self.logger = logger
        self.shell = None
        self.exit_status = 0
        self.config_handler = ConfigHandler(self)
        self.config_data = self.config_handler.config_data
        self.path_handler = PATH_HELPERS_MODULE.PathHandler(self)  # pyright: ignore
        self.gtk_helpers = GTK_HELPERS_MODULE.GtkHelpers(self)  # pyright: ignore

    def get_config(self, key_path, default=None):
        """Safely retrieves a configuration value using a list of keys."""
        return self.config_handler.get_root_setting(key_path, default)

    def displayed_period(self, today):
        """
        Month and year shown by the calendar popup. A 0 in the configuration
        means the current month or year.
        """
        return configured_period(self.config_handler, today)

    def do_activate(self):
        """
        Registers the stylesheets once for the process, then assembles the
        panel. A fatal startup error quits before any window is shown.
        """
        if self.shell is not None:
            self.logger.debug("Panel already active, ignoring activation.")
            return
        self.logger.info("Activating application...")
        self.gtk_helpers.load_css_from_files(self.path_handler.get_style_paths())
        today = datetime.date.today()
        toolkit = CREATE_PANEL_MODULE.GtkToolkit(  # pyright: ignore
            self, self.config_handler, self.gtk_helpers, self.logger
        )
        shell = PanelShell(
            toolkit,
            placement=PlacementEngine(PlacementSettings.from_config(self.config_handler)),
            period=self.displayed_period(today),
            today=today,
            logger=self.logger,
        )
        try:
            shell.setup()
        except (FatalStartupError, CalendarGridError) as e:
            self.logger.critical(f"Panel startup aborted: {e}")
            self.exit_status = FATAL_EXIT_STATUS
            self.quit()
            return
        self.shell = shell
        self.logger.info("Application activation completed.")
