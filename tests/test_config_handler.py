import datetime

import pytest
import toml

from dotpanel.core.placement import PlacementSettings
from dotpanel.core.shell import configured_period
from dotpanel.shared.config_handler import ConfigHandler


def config_file(xdg_home):
    return xdg_home / "config" / "dotpanel" / "config.toml"


def test_missing_file_is_created_with_defaults(xdg_home, panel_instance):
    handler = ConfigHandler(panel_instance)
    path = config_file(xdg_home)
    assert path.is_file()
    written = toml.load(path)
    assert written["org.dotpanel.panel"]["geometry"]["padding"] == 8
    assert handler.get_root_setting(["org.dotpanel.clock", "format"]) == "%d %b %H:%M"


def test_hints_are_not_written(xdg_home, panel_instance):
    ConfigHandler(panel_instance)
    text = config_file(xdg_home).read_text()
    assert "_hint" not in text


def test_user_values_win_and_defaults_fill_gaps(xdg_home, panel_instance):
    path = config_file(xdg_home)
    path.parent.mkdir(parents=True)
    path.write_text('["org.dotpanel.panel".geometry]\npadding = 4\n')
    handler = ConfigHandler(panel_instance)
    assert handler.get_root_setting(["org.dotpanel.panel", "geometry", "padding"]) == 4
    assert handler.get_root_setting(["org.dotpanel.panel", "geometry", "bar_height"]) == 16
    assert PlacementSettings.from_config(handler) == PlacementSettings(padding=4)


def test_corrupt_file_falls_back_without_overwriting(xdg_home, panel_instance):
    path = config_file(xdg_home)
    path.parent.mkdir(parents=True)
    path.write_text("this is = = not toml")
    handler = ConfigHandler(panel_instance)
    assert handler.get_root_setting(["org.dotpanel.calendar", "month"]) == 0
    handler.save_config()
    assert path.read_text() == "this is = = not toml"


def test_missing_key_returns_default(xdg_home, panel_instance):
    handler = ConfigHandler(panel_instance)
    assert handler.get_root_setting(["nope", "missing"], "fallback") == "fallback"


def write_config(xdg_home, text):
    path = config_file(xdg_home)
    path.parent.mkdir(parents=True)
    path.write_text(text)
    return path


@pytest.mark.parametrize("value", ['"wide"', "true", "[1, 2]"])
def test_non_integer_geometry_falls_back_to_default(xdg_home, panel_instance, value):
    write_config(
        xdg_home, f'["org.dotpanel.panel".geometry]\npadding = {value}\nbar_height = 24\n'
    )
    handler = ConfigHandler(panel_instance)
    settings = PlacementSettings.from_config(handler)
    assert settings == PlacementSettings(padding=8, bar_height=24)


def test_integer_setting_accepts_numeric_strings(xdg_home, panel_instance):
    write_config(xdg_home, '["org.dotpanel.start_menu"]\nmax_entries = "5"\n')
    handler = ConfigHandler(panel_instance)
    assert handler.get_int_setting(["org.dotpanel.start_menu", "max_entries"], 12) == 5


def test_invalid_integer_is_logged(xdg_home, panel_instance, caplog):
    write_config(xdg_home, '["org.dotpanel.calendar"]\nmonth = "x"\n')
    handler = ConfigHandler(panel_instance)
    with caplog.at_level("WARNING", logger="dotpanel.tests"):
        assert handler.get_int_setting(["org.dotpanel.calendar", "month"], 0) == 0
    assert "Invalid integer 'x'" in caplog.text


TODAY = datetime.date(2024, 2, 15)


def test_period_defaults_to_today(xdg_home, panel_instance):
    handler = ConfigHandler(panel_instance)
    assert configured_period(handler, TODAY) == (2, 2024)


def test_period_from_config(xdg_home, panel_instance):
    write_config(xdg_home, '["org.dotpanel.calendar"]\nmonth = 1\nyear = 2021\n')
    handler = ConfigHandler(panel_instance)
    assert configured_period(handler, TODAY) == (1, 2021)


def test_period_with_only_a_year(xdg_home, panel_instance):
    write_config(xdg_home, '["org.dotpanel.calendar"]\nyear = 1999\n')
    handler = ConfigHandler(panel_instance)
    assert configured_period(handler, TODAY) == (2, 1999)


def test_unusable_period_values_mean_current_month(xdg_home, panel_instance):
    write_config(xdg_home, '["org.dotpanel.calendar"]\nmonth = "x"\nyear = "next"\n')
    handler = ConfigHandler(panel_instance)
    assert configured_period(handler, TODAY) == (2, 2024)
