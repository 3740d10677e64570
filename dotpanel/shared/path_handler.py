import os
from pathlib import Path

APP_NAME = "dotpanel"
PACKAGE_DIR = Path(__file__).resolve().parent.parent


class PathHandler:
    """
    Resolves dotpanel's XDG directories and the resources shipped with the
    package.
    """

    def __init__(self, panel_instance):
        """
        Args:
            panel_instance: The panel instance, used for accessing the logger.
        """
        self.app_name = APP_NAME
        self._home = Path.home()
        self.logger = panel_instance.logger

    def _get_xdg_base_dir(self, env_var: str, default_path: Path) -> Path:
        """Helper to get XDG base directory with fallback."""
        path_str = os.getenv(env_var)
        if path_str:
            return Path(path_str)
        return default_path

    def get_config_dir(self) -> Path:
        """
        Returns $XDG_CONFIG_HOME/dotpanel or ~/.config/dotpanel, creating it
        if needed.
        """
        config_home = self._get_xdg_base_dir("XDG_CONFIG_HOME", self._home / ".config")
        config_dir = config_home / self.app_name
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_resource_path(self, *path_parts) -> Path:
        """Path of a file bundled in the package's resources directory."""
        return PACKAGE_DIR / "resources" / Path(*path_parts)

    def get_style_paths(self) -> list:
        """
        CSS files applied at startup, packaged stylesheet first so the user's
        styles.css takes precedence.
        """
        paths = [self.get_resource_path("panel.css")]
        user_css = self.get_config_dir() / "styles.css"
        if user_css.is_file():
            paths.append(user_css)
        else:
            self.logger.debug(f"No user stylesheet at {user_css}")
        return paths
