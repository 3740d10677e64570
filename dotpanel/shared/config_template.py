default_config = {
    "_section_hint": (
        "General configuration settings for dotpanel, a dock bar with a "
        "start menu and a calendar popup."
    ),
    "org.dotpanel.panel": {
        "_section_hint": "Global settings for the panel windows.",
        "primary_output": {
            "_section_hint": "Settings for the main display output/monitor.",
            "name": "",
            "name_hint": (
                "Connector name of the display the panel is placed on "
                "(e.g., DP-1, HDMI-A-1). Leave empty to use the first monitor."
            ),
        },
        "geometry": {
            "_section_hint": "Spacing used to place the bar and its popups.",
            "padding": 8,
            "padding_hint": (
                "Gap (in pixels) between the bar, the popups and the screen edges."
            ),
            "bar_height": 16,
            "bar_height_hint": "The fixed height (in pixels) of the dock bar.",
            "bar_offset": 32,
            "bar_offset_hint": (
                "Distance (in pixels) between the bottom of the bar and the "
                "bottom edge of the display."
            ),
        },
        "layers": {
            "_section_hint": "Stacking layer of each panel window.",
            "main_bar": "TOP",
            "start_menu": "OVERLAY",
            "calendar": "OVERLAY",
            "main_bar_hint": (
                "One of 'BACKGROUND', 'BOTTOM', 'TOP' or 'OVERLAY'. Popups "
                "default to 'OVERLAY' so they stay above the bar."
            ),
        },
    },
    "org.dotpanel.calendar": {
        "_section_hint": "Calendar popup opened from the clock button.",
        "month": 0,
        "month_hint": "Displayed month (1-12). 0 shows the current month.",
        "year": 0,
        "year_hint": "Displayed year. 0 shows the current year.",
    },
    "org.dotpanel.clock": {
        "_section_hint": "Clock shown on the calendar button of the bar.",
        "format": "%d %b %H:%M",
        "format_hint": "strftime format of the clock label.",
    },
    "org.dotpanel.start_menu": {
        "_section_hint": "Start menu popup opened from the start button.",
        "icon": "start-here-symbolic",
        "icon_hint": "Icon name of the start button.",
        "max_entries": 12,
        "max_entries_hint": "Number of applications listed in the start menu.",
    },
}
