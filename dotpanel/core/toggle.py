from enum import Enum

from dotpanel.core.window import WindowHandle


class PopupState(Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


class PopupToggle:
    """
    Two-state visibility switch bound to one popup window.

    Starts HIDDEN; every trigger flips the window's current visibility, so a
    popup hidden by the toolkit or compositor opens again on the next click.
    Nothing else about the window is touched.
    """

    def __init__(self, window: WindowHandle):
        self.window = window
        self.state = PopupState.HIDDEN

    @property
    def visible(self) -> bool:
        return self.state is PopupState.VISIBLE

    def sync(self) -> PopupState:
        self.state = (
            PopupState.VISIBLE if self.window.is_visible() else PopupState.HIDDEN
        )
        return self.state

    def toggle(self, *_) -> PopupState:
        if self.sync() is PopupState.HIDDEN:
            self.state = PopupState.VISIBLE
        else:
            self.state = PopupState.HIDDEN
        self.window.set_visible(self.visible)
        return self.state
